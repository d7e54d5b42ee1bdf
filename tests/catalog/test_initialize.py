from pathlib import Path

import pytest

from fantasy_cricket_manager.catalog.initialize import initialize_catalog, load_seed
from fantasy_cricket_manager.domain.player import Country


class TestInitializeCatalog:
    def test_builds_players_with_defaults(self) -> None:
        players = initialize_catalog({"India": ["Virat Kohli", "Rohit Sharma"], "Ireland": ["Paul Stirling"]})
        assert [p.id for p in players] == ["india_virat_kohli", "india_rohit_sharma", "ireland_paul_stirling"]
        assert all(p.price == 5.0 and p.points == 0.0 for p in players)
        assert players[2].country is Country.IRELAND

    def test_custom_opening_price(self) -> None:
        players = initialize_catalog({"England": ["Joe Root"]}, price=8.5)
        assert players[0].price == 8.5

    def test_rerun_yields_same_ids(self) -> None:
        seed = {"New Zealand": ["Kane Williamson"]}
        assert initialize_catalog(seed) == initialize_catalog(seed)

    def test_unknown_country_rejected(self) -> None:
        with pytest.raises(ValueError, match="Unknown country 'Narnia'"):
            initialize_catalog({"Narnia": ["Aslan"]})

    def test_empty_seed(self) -> None:
        assert initialize_catalog({}) == []


class TestLoadSeed:
    def test_reads_mapping(self, tmp_path: Path) -> None:
        seed = tmp_path / "players.yaml"
        seed.write_text("India:\n  - Virat Kohli\nAfghanistan:\n  - Rashid Khan\n")
        assert load_seed(seed) == {"India": ["Virat Kohli"], "Afghanistan": ["Rashid Khan"]}

    def test_rejects_non_mapping(self, tmp_path: Path) -> None:
        seed = tmp_path / "players.yaml"
        seed.write_text("- just a list\n")
        with pytest.raises(ValueError, match="expected a mapping"):
            load_seed(seed)

    def test_rejects_non_list_names(self, tmp_path: Path) -> None:
        seed = tmp_path / "players.yaml"
        seed.write_text("India: Virat Kohli\n")
        with pytest.raises(ValueError, match="must be a list"):
            load_seed(seed)
