from dataclasses import dataclass
from typing import Any, Dict, Iterator, Mapping, Optional, Tuple


@dataclass(frozen=True)
class GroupRule:
    """Selects audits for one enrichment group by their Lighthouse id."""

    name: str
    pattern: str
    match: str = "substring"  # "prefix" | "substring"
    fields: Tuple[str, ...] = ("title", "score")
    requires: Optional[str] = None  # group is empty unless this audit is present and non-empty

    def matches(self, audit_id: str) -> bool:
        if self.match == "prefix":
            return audit_id.startswith(self.pattern)
        return self.pattern in audit_id

    def select(self, audits: Mapping[str, Any]) -> Iterator[Dict[str, Any]]:
        if self.requires and not audits.get(self.requires):
            return
        for audit_id, data in audits.items():
            if not self.matches(audit_id):
                continue
            data = data if isinstance(data, dict) else {}
            item = {"id": audit_id}
            for f in self.fields:
                item[f] = data.get(f)
            yield item


# Tied to Lighthouse's audit naming; renamed ids only need an edit here.
GROUP_RULES: Tuple[GroupRule, ...] = (
    GroupRule(
        name="accessibility_checks",
        pattern="accessibility",
        match="prefix",
        fields=("title", "score", "description"),
        requires="accessibility-score",
    ),
    GroupRule(
        name="best_practices",
        pattern="best-practices",
        fields=("title", "score"),
    ),
    GroupRule(
        name="seo_metrics",
        pattern="seo",
        fields=("title", "score", "description"),
    ),
)
