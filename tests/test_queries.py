"""
Tests for the query operations shared by the HTTP and MCP surfaces.
"""

from pathlib import Path

import pytest

from design_api import queries
from design_api.dataset import DatasetStore
from design_api.errors import BadRequestError, NotFoundError

from .helpers import SAMPLE_DATASET, write_dataset


class TestServiceInfo:
    def test_stats(self, store: DatasetStore) -> None:
        info = queries.service_info(store)

        assert info["stats"] == {"components": 4, "tokens": 3, "total": 7}
        assert info["endpoints"] == queries.ENDPOINTS

    def test_stats_without_tokens(self, tmp_path: Path) -> None:
        store = DatasetStore(write_dataset(tmp_path / "d.json", {"button": {}}))

        assert queries.service_info(store)["stats"] == {"components": 1, "tokens": 0, "total": 1}


class TestListComponents:
    def test_lists_every_component_in_order(self, store: DatasetStore) -> None:
        names = [c["name"] for c in queries.list_components(store)]
        assert names == ["button", "datatable", "Dialog", "divider"]

    def test_summary_flags(self, store: DatasetStore) -> None:
        summaries = {c["name"]: c for c in queries.list_components(store)}

        assert summaries["button"]["hasProps"] is True
        assert summaries["button"]["hasExamples"] is True
        assert summaries["datatable"]["hasExamples"] is False
        assert summaries["divider"] == {"name": "divider", "hasProps": False, "hasExamples": False}

    @pytest.mark.parametrize(
        "q, expected",
        [
            ("data", ["datatable"]),
            ("CON", ["button", "Dialog"]),
            ("overlay", ["Dialog"]),
            ("zzz", []),
        ],
    )
    def test_filter(self, store: DatasetStore, q: str, expected: list) -> None:
        assert [c["name"] for c in queries.list_components(store, q)] == expected

    def test_filter_is_sound_and_complete(self, store: DatasetStore) -> None:
        term = "d"
        returned = {c["name"] for c in queries.list_components(store, term)}

        for name in store.component_names():
            record = SAMPLE_DATASET[name]
            fields = [name, record.get("title") or "", record.get("description") or ""]
            assert (name in returned) == any(term in f.lower() for f in fields)

    def test_empty_query_returns_everything(self, store: DatasetStore) -> None:
        assert len(queries.list_components(store, "")) == 4


class TestGetComponent:
    def test_returns_exact_record(self, store: DatasetStore) -> None:
        for name in store.component_names():
            assert queries.get_component(store, name) == SAMPLE_DATASET[name]

    def test_section(self, store: DatasetStore) -> None:
        assert queries.get_component(store, "Button", "Props") == SAMPLE_DATASET["button"]["props"]

    def test_unknown_component(self, store: DatasetStore) -> None:
        with pytest.raises(NotFoundError) as exc_info:
            queries.get_component(store, "nope")

        assert exc_info.value.message == "Component 'nope' not found"
        assert exc_info.value.available == ["button", "datatable", "Dialog", "divider"]

    def test_unknown_section_lists_object_sections(self, store: DatasetStore) -> None:
        with pytest.raises(NotFoundError) as exc_info:
            queries.get_component(store, "button", "slots")

        assert exc_info.value.message == "Section 'slots' not found in 'button'"
        assert exc_info.value.available == ["props", "examples", "cssVariables", "emits"]

    def test_suggestions_are_capped(self, tmp_path: Path) -> None:
        data = {f"comp{i:02d}": {} for i in range(15)}
        data["_tokens"] = {"a": "b"}
        store = DatasetStore(write_dataset(tmp_path / "d.json", data))

        with pytest.raises(NotFoundError) as exc_info:
            queries.get_component(store, "missing")

        assert exc_info.value.available == [f"comp{i:02d}" for i in range(10)]


class TestGetTokens:
    def test_all_tokens(self, store: DatasetStore) -> None:
        result = queries.get_tokens(store)

        assert result["tokens"] == SAMPLE_DATASET["_tokens"]
        assert result["count"] == 3

    def test_filter_by_key_and_value(self, store: DatasetStore) -> None:
        assert list(queries.get_tokens(store, "PRIMARY")["tokens"]) == ["primary.color"]
        assert list(queries.get_tokens(store, "#F8F")["tokens"]) == ["surface.ground"]
        assert list(queries.get_tokens(store, "0.5rem")["tokens"]) == ["button.padding"]

    def test_non_string_values_only_match_by_key(self, tmp_path: Path) -> None:
        data = {"_tokens": {"spacing.unit": 4, "radius": "4px"}}
        store = DatasetStore(write_dataset(tmp_path / "d.json", data))

        result = queries.get_tokens(store, "4")

        assert result == {"count": 1, "tokens": {"radius": "4px"}}


class TestSearch:
    def test_requires_query(self, store: DatasetStore) -> None:
        with pytest.raises(BadRequestError):
            queries.search(store, None)
        with pytest.raises(BadRequestError):
            queries.search(store, "")

    def test_component_facets(self, store: DatasetStore) -> None:
        result = queries.search(store, "button")

        assert result["results"][0] == {
            "type": "component",
            "name": "button",
            "title": "Button",
            "description": "Clickable control",
            "matches": ["name", "title"],
        }

    def test_prop_facets(self, store: DatasetStore) -> None:
        result = queries.search(store, "pag")

        assert result["results"] == [
            {
                "type": "component",
                "name": "datatable",
                "title": "DataTable",
                "description": "Displays data in tabular format",
                "matches": ["prop:paginator"],
            }
        ]

    def test_components_come_before_tokens(self, store: DatasetStore) -> None:
        result = queries.search(store, "button")

        assert [r["type"] for r in result["results"]] == ["component", "token"]
        assert result["results"][1] == {
            "type": "token",
            "name": "button.padding",
            "value": "0.5rem 1rem",
            "matches": ["token"],
        }
        assert result["count"] == 2
        assert result["query"] == "button"

    def test_token_hit_by_value(self, store: DatasetStore) -> None:
        result = queries.search(store, "#007B")

        assert result["results"] == [
            {"type": "token", "name": "primary.color", "value": "#007bff", "matches": ["token"]}
        ]

    def test_does_not_mutate_dataset(self, store: DatasetStore) -> None:
        before = repr(store.get_dataset())

        queries.search(store, "a")
        queries.list_components(store, "a")
        queries.get_tokens(store, "a")

        assert repr(store.get_dataset()) == before
