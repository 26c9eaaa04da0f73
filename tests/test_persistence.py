"""Tests for the persisted snapshot codec, key-value stores and the gateway."""

from __future__ import annotations

import json

import pytest

from geocoin.core.cache import Cache
from geocoin.core.errors import MalformedSnapshot
from geocoin.core.models import Cell, LatLng, Token
from geocoin.core.player import PlayerState
from geocoin.core.snapshot import PersistedSnapshot
from geocoin.core.world_memory import WorldMemory
from geocoin.core.world_state import WorldState
from geocoin.engine.persistence import PersistenceGateway
from geocoin.systems.grid_mapper import GridMapper
from geocoin.systems.oracle import HashOracle
from geocoin.systems.storage import JsonFileStore, MemoryStore

KEY = "geocoinState"


def _gateway(store=None) -> PersistenceGateway:
    oracle = HashOracle()
    return PersistenceGateway(store or MemoryStore(), GridMapper(), lambda: WorldMemory(oracle), key=KEY)


def _world_at(cell: Cell) -> WorldState:
    mapper = GridMapper()
    memory = WorldMemory(HashOracle())
    return WorldState(PlayerState.starting_at(mapper.center(cell), cell), memory)


def _scenario_world() -> WorldState:
    world = _world_at(Cell(5, -3))
    world.player.inventory.push(Token(4, Cell(1, 1)))
    visited = Cache.create(Cell(6, -2), 2)
    world.memory.restore_cache(visited.cell, visited.capture())
    return world


class FailingStore(MemoryStore):
    def set_item(self, key: str, value: str) -> None:
        raise OSError("disk full")


class TestSaveLoad:
    def test_round_trip_scenario(self):
        gateway = _gateway()
        world = _scenario_world()
        assert gateway.save(world) is True

        loaded = gateway.load()
        assert loaded is not None
        assert loaded.player.cell == Cell(5, -3)
        assert loaded.player.position == world.player.position
        assert loaded.player.inventory.tokens == [Token(4, Cell(1, 1))]
        assert set(loaded.memory) == {Cell(6, -2)}
        assert loaded.memory.get(Cell(6, -2)).tokens == [Token(0, Cell(6, -2)), Token(1, Cell(6, -2))]
        assert loaded.player.trail == world.player.trail

    def test_round_trip_through_file(self, tmp_path):
        path = tmp_path / "state.json"
        world = _scenario_world()
        _gateway(JsonFileStore(path)).save(world)

        loaded = _gateway(JsonFileStore(path)).load()
        assert loaded is not None
        assert PersistedSnapshot.from_world(loaded).to_dict() == PersistedSnapshot.from_world(world).to_dict()

    def test_save_overwrites(self):
        gateway = _gateway()
        world = _scenario_world()
        gateway.save(world)
        world.player.inventory.pop()
        gateway.save(world)
        assert len(gateway.load().player.inventory) == 0

    def test_load_absent(self):
        assert _gateway().load() is None

    def test_reset_clears_store(self):
        store = MemoryStore()
        gateway = _gateway(store)
        gateway.save(_scenario_world())
        gateway.reset()
        assert store.get_item(KEY) is None
        assert gateway.load() is None

    def test_save_failure_is_reported_not_raised(self):
        assert _gateway(FailingStore()).save(_scenario_world()) is False

    def test_trail_point_outside_cell_falls_back_to_cell_corner(self):
        snapshot = PersistedSnapshot(player_cell=Cell(2, 2), trail=(LatLng(0.0, 0.0),))
        world = _gateway().rebuild(snapshot)
        assert world.player.position == GridMapper().to_position(Cell(2, 2))
        assert world.player.trail[-1] == world.player.position
        assert len(world.player.trail) == 2


class TestWireFormat:
    def test_layout(self):
        data = json.loads(PersistedSnapshot.from_world(_scenario_world()).to_json())
        assert data["version"] == 1
        assert data["playerCell"] == {"i": 5, "j": -3}
        assert data["playerInventory"] == [{"serial": 4, "homeCell": {"i": 1, "j": 1}}]
        assert data["worldMemoryStore"] == {
            "6:-2": [
                {"serial": 0, "homeCell": {"i": 6, "j": -2}},
                {"serial": 1, "homeCell": {"i": 6, "j": -2}},
            ]
        }
        assert len(data["movementTrail"]) == 1
        assert len(data["movementTrail"][0]) == 2

    @pytest.mark.parametrize(
        "payload",
        [
            "",
            "{",
            "[]",
            '{"playerInventory": []}',
            '{"playerCell": {"i": "a", "j": 0}}',
            '{"playerCell": {"i": 0, "j": 0}, "worldMemoryStore": {"bad-key": []}}',
            '{"playerCell": {"i": 0, "j": 0}, "playerInventory": [{"serial": -1, "homeCell": {"i": 0, "j": 0}}]}',
            '{"playerCell": {"i": 0, "j": 0}, "movementTrail": [[1.0]]}',
            '{"version": 99, "playerCell": {"i": 0, "j": 0}}',
            '{"playerCell": {"i": 0, "j": 0}, "movementTrail": [[1e400, 0.0]]}',
            '{"playerCell": {"i": 0, "j": 0}, "movementTrail": [[NaN, 0.0]]}',
            '{"playerCell": {"i": 0, "j": 0}, "movementTrail": [[0.0, -Infinity]]}',
        ],
    )
    def test_malformed_payloads_raise(self, payload):
        with pytest.raises(MalformedSnapshot):
            PersistedSnapshot.from_json(payload)

    def test_malformed_store_loads_as_absent(self, caplog):
        store = MemoryStore()
        store.set_item(KEY, '{"playerCell": 12}')
        with caplog.at_level("WARNING"):
            assert _gateway(store).load() is None
        assert "malformed" in caplog.text

    @pytest.mark.parametrize("point", ["[1e400, 0.0]", "[NaN, 0.0]"])
    def test_non_finite_trail_loads_as_absent(self, point):
        store = MemoryStore()
        store.set_item(KEY, '{"version": 1, "playerCell": {"i": 0, "j": 0}, "movementTrail": [' + point + "]}")
        assert _gateway(store).load() is None

    def test_minimal_payload_defaults(self):
        snap = PersistedSnapshot.from_json('{"playerCell": {"i": 1, "j": 2}}')
        assert snap.player_cell == Cell(1, 2)
        assert snap.inventory == ()
        assert snap.caches == {}
        assert snap.trail == ()


class TestJsonFileStore:
    def test_set_get_clear(self, tmp_path):
        store = JsonFileStore(tmp_path / "nested" / "kv.json")
        assert store.get_item("a") is None
        store.set_item("a", "1")
        store.set_item("b", "2")
        assert store.get_item("a") == "1"
        assert store.get_item("b") == "2"
        store.clear()
        assert store.get_item("a") is None
        assert not store.path.exists()

    def test_clear_missing_file(self, tmp_path):
        JsonFileStore(tmp_path / "none.json").clear()

    def test_corrupt_file_reads_empty(self, tmp_path):
        path = tmp_path / "kv.json"
        path.write_text("not json", encoding="utf-8")
        store = JsonFileStore(path)
        assert store.get_item(KEY) is None
        store.set_item(KEY, "x")
        assert store.get_item(KEY) == "x"

    def test_undecodable_file_reads_empty(self, tmp_path, caplog):
        path = tmp_path / "kv.json"
        path.write_bytes(b"\xff\xfe garbage")
        store = JsonFileStore(path)
        with caplog.at_level("WARNING"):
            assert store.get_item(KEY) is None
        assert "not valid UTF-8 JSON" in caplog.text
        store.set_item(KEY, "x")
        assert json.loads(path.read_text(encoding="utf-8")) == {KEY: "x"}

    def test_undecodable_file_does_not_break_gateway(self, tmp_path):
        path = tmp_path / "kv.json"
        path.write_bytes(b"\xff\xfe garbage")
        gateway = _gateway(JsonFileStore(path))
        assert gateway.load() is None
        assert gateway.save(_world_at(Cell(4, 4)))
        assert gateway.load().player.cell == Cell(4, 4)

    def test_non_string_value_ignored(self, tmp_path):
        path = tmp_path / "kv.json"
        path.write_text(json.dumps({KEY: {"nested": True}}), encoding="utf-8")
        assert JsonFileStore(path).get_item(KEY) is None

    def test_no_temp_files_left(self, tmp_path):
        store = JsonFileStore(tmp_path / "kv.json")
        store.set_item("a", "1")
        assert [p.name for p in tmp_path.iterdir()] == ["kv.json"]
