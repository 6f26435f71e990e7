"""Tests for the enrichment group rule table."""

from pagescore.audit.rules import GROUP_RULES, GroupRule


class TestGroupRule:
    def test_prefix_match(self):
        rule = GroupRule(name="x", pattern="accessibility", match="prefix")
        assert rule.matches("accessibility-score")
        assert not rule.matches("color-accessibility")

    def test_substring_match(self):
        rule = GroupRule(name="x", pattern="seo")
        assert rule.matches("seo-friendly")
        assert rule.matches("is-seo-ok")
        assert not rule.matches("SEO-upper")

    def test_select_projects_fields_in_order(self):
        rule = GroupRule(name="x", pattern="seo", fields=("title", "score"))
        audits = {
            "z-seo": {"title": "Z", "score": 1, "description": "hidden"},
            "viewport": {"title": "V", "score": 1},
            "a-seo": {"title": "A"},
        }
        assert list(rule.select(audits)) == [
            {"id": "z-seo", "title": "Z", "score": 1},
            {"id": "a-seo", "title": "A", "score": None},
        ]

    def test_requires_gate(self):
        rule = GroupRule(name="x", pattern="accessibility", match="prefix",
                         requires="accessibility-score")
        assert list(rule.select({"accessibility-tree": {"title": "T"}})) == []

    def test_requires_gate_ignores_null_record(self):
        rule = GroupRule(name="x", pattern="accessibility", match="prefix",
                         requires="accessibility-score")
        audits = {"accessibility-score": None, "accessibility-tree": {"title": "T"}}
        assert list(rule.select(audits)) == []

    def test_non_dict_audit_record(self):
        rule = GroupRule(name="x", pattern="seo")
        assert list(rule.select({"seo": None})) == [{"id": "seo", "title": None, "score": None}]


class TestDefaultTable:
    def test_group_names(self):
        assert [r.name for r in GROUP_RULES] == [
            "accessibility_checks", "best_practices", "seo_metrics",
        ]

    def test_best_practices_has_no_description(self):
        rule = next(r for r in GROUP_RULES if r.name == "best_practices")
        assert "description" not in rule.fields
