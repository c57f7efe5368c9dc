"""TypeRegistry 테스트: 노드 생성, 상성 조회/설정, 핸들 검증"""

from __future__ import annotations

import gc
import weakref

import pytest

from monstermaker.core.type_chart import DEFAULT_EFFECTIVENESS, TypeRef, TypeRegistry


@pytest.fixture()
def registry() -> TypeRegistry:
    return TypeRegistry()


# ── 생성 ─────────────────────────────────────────────


class TestCreate:
    def test_fresh_node_is_neutral(self, registry: TypeRegistry) -> None:
        a = registry.create("a")
        b = registry.create("b")
        assert registry.effectiveness_of(a, b) == 1.0
        assert registry.effectiveness_of(b, a) == 1.0
        assert registry.effectiveness_of(a, a) == 1.0

    def test_indices_follow_creation_order(self, registry: TypeRegistry) -> None:
        refs = [registry.create(n) for n in ("x", "y", "z")]
        assert [r.index for r in refs] == [0, 1, 2]
        assert registry.get_all() == refs
        assert registry.count() == 3

    def test_name_of(self, registry: TypeRegistry) -> None:
        fire = registry.create("fire")
        assert registry.name_of(fire) == "fire"

    def test_get(self, registry: TypeRegistry) -> None:
        fire = registry.create("fire")
        assert registry.get(0) == fire
        assert registry.get(1) is None
        assert registry.get(-1) is None

    def test_contains(self, registry: TypeRegistry) -> None:
        fire = registry.create("fire")
        assert fire in registry
        assert TypeRef(index=5, registry_id=fire.registry_id) not in registry
        assert "fire" not in registry


# ── 상성 ─────────────────────────────────────────────


class TestEffectiveness:
    def test_set_then_get(self, registry: TypeRegistry) -> None:
        a = registry.create("a")
        b = registry.create("b")
        registry.set_effectiveness(a, b, 1.5)
        assert registry.effectiveness_of(a, b) == 1.5

    def test_asymmetric(self, registry: TypeRegistry) -> None:
        a = registry.create("a")
        b = registry.create("b")
        registry.set_effectiveness(a, b, 2.0)
        assert registry.effectiveness_of(b, a) == 1.0

        registry.set_effectiveness(b, a, 0.5)
        assert registry.effectiveness_of(a, b) == 2.0
        assert registry.effectiveness_of(b, a) == 0.5

    def test_insertion_order_independent(self) -> None:
        first = TypeRegistry()
        a1, b1, c1 = (first.create(n) for n in "abc")
        first.set_effectiveness(a1, b1, 2.0)
        first.set_effectiveness(a1, c1, 0.5)

        second = TypeRegistry()
        a2, b2, c2 = (second.create(n) for n in "abc")
        second.set_effectiveness(a2, c2, 0.5)
        second.set_effectiveness(a2, b2, 2.0)

        assert first.effectiveness_of(a1, b1) == second.effectiveness_of(a2, b2) == 2.0
        assert first.effectiveness_of(a1, c1) == second.effectiveness_of(a2, c2) == 0.5

    def test_overwrite_last_write_wins(self, registry: TypeRegistry) -> None:
        a = registry.create("a")
        b = registry.create("b")
        registry.set_effectiveness(a, b, 2.0)
        registry.set_effectiveness(a, b, 0.5)
        assert registry.effectiveness_of(a, b) == 0.5

    def test_no_range_validation(self, registry: TypeRegistry) -> None:
        a = registry.create("a")
        b = registry.create("b")
        registry.set_effectiveness(a, b, -3.0)
        assert registry.effectiveness_of(a, b) == -3.0
        registry.set_effectiveness(a, b, 0.0)
        assert registry.effectiveness_of(a, b) == 0.0
        registry.set_effectiveness(a, b, 100)
        assert registry.effectiveness_of(a, b) == 100.0

    def test_fire_water_scenario(self, registry: TypeRegistry) -> None:
        fire = registry.create("fire")
        water = registry.create("water")
        # 물 → 불 2배
        registry.set_effectiveness(fire, water, 2.0)
        assert registry.effectiveness_of(fire, water) == 2.0
        assert registry.effectiveness_of(water, fire) == 1.0


class TestSelfRelation:
    def test_only_node(self, registry: TypeRegistry) -> None:
        ghost = registry.create("ghost")
        registry.set_effectiveness(ghost, ghost, 2.0)
        assert registry.effectiveness_of(ghost, ghost) == 2.0

    def test_among_many(self, registry: TypeRegistry) -> None:
        others = [registry.create(f"t{i}") for i in range(10)]
        ghost = registry.create("ghost")
        registry.set_effectiveness(ghost, ghost, 2.0)
        assert registry.effectiveness_of(ghost, ghost) == 2.0
        for other in others:
            assert registry.effectiveness_of(ghost, other) == 1.0
            assert registry.effectiveness_of(other, ghost) == 1.0

    def test_still_usable_after_self_relation(self, registry: TypeRegistry) -> None:
        ghost = registry.create("ghost")
        normal = registry.create("normal")
        registry.set_effectiveness(ghost, ghost, 2.0)
        registry.set_effectiveness(ghost, normal, 0.0)
        registry.set_effectiveness(ghost, ghost, 0.5)
        assert registry.effectiveness_of(ghost, ghost) == 0.5
        assert registry.effectiveness_of(ghost, normal) == 0.0

    def test_discarded_registries_are_reclaimed(self) -> None:
        """자기 참조 노드를 반복 생성/폐기해도 저장소가 회수된다"""
        refs = []
        for _ in range(100):
            registry = TypeRegistry()
            ghost = registry.create("ghost")
            registry.set_effectiveness(ghost, ghost, 2.0)
            refs.append(weakref.ref(registry))
            del registry
        gc.collect()
        assert all(r() is None for r in refs)


class TestNameCollision:
    def test_duplicate_names_are_distinct(self, registry: TypeRegistry) -> None:
        first = registry.create("twin")
        second = registry.create("twin")
        other = registry.create("other")

        assert first != second
        registry.set_effectiveness(first, other, 2.0)

        assert registry.effectiveness_of(first, other) == 2.0
        assert registry.effectiveness_of(second, other) == 1.0
        assert registry.name_of(first) == registry.name_of(second)

    def test_self_relation_not_shared_by_twin(self, registry: TypeRegistry) -> None:
        first = registry.create("twin")
        second = registry.create("twin")
        registry.set_effectiveness(first, first, 2.0)
        assert registry.effectiveness_of(first, second) == 1.0
        assert registry.effectiveness_of(second, second) == 1.0

    def test_rename_keeps_relations(self, registry: TypeRegistry) -> None:
        fire = registry.create("fire")
        water = registry.create("water")
        registry.set_effectiveness(fire, water, 2.0)
        registry.rename(fire, "water")
        assert registry.name_of(fire) == "water"
        assert registry.effectiveness_of(fire, water) == 2.0

    def test_find_by_name(self, registry: TypeRegistry) -> None:
        first = registry.create("twin")
        second = registry.create("twin")
        assert registry.find_by_name("twin") == first
        assert registry.find_all_by_name("twin") == [first, second]
        assert registry.find_by_name("missing") is None
        assert registry.find_all_by_name("missing") == []


# ── 희소 저장 ─────────────────────────────────────────


class TestOverrides:
    def test_overrides_of(self, registry: TypeRegistry) -> None:
        fire = registry.create("fire")
        water = registry.create("water")
        grass = registry.create("grass")
        registry.set_effectiveness(fire, water, 2.0)
        registry.set_effectiveness(fire, grass, 0.5)
        assert registry.overrides_of(fire) == {water: 2.0, grass: 0.5}
        assert registry.overrides_of(water) == {}

    def test_neutral_is_not_stored(self, registry: TypeRegistry) -> None:
        """1.0 설정은 미설정과 구분되지 않는다"""
        fire = registry.create("fire")
        water = registry.create("water")
        registry.set_effectiveness(fire, water, 2.0)
        registry.set_effectiveness(fire, water, DEFAULT_EFFECTIVENESS)
        assert registry.effectiveness_of(fire, water) == 1.0
        assert registry.overrides_of(fire) == {}

    def test_overrides_is_a_copy(self, registry: TypeRegistry) -> None:
        fire = registry.create("fire")
        water = registry.create("water")
        registry.set_effectiveness(fire, water, 2.0)
        registry.overrides_of(fire)[water] = 4.0
        assert registry.effectiveness_of(fire, water) == 2.0


# ── 핸들 검증 ─────────────────────────────────────────


class TestForeignHandle:
    def test_handle_from_other_registry(self, registry: TypeRegistry) -> None:
        mine = registry.create("fire")
        foreign = TypeRegistry().create("fire")
        assert foreign.index == mine.index
        with pytest.raises(ValueError):
            registry.effectiveness_of(mine, foreign)
        with pytest.raises(ValueError):
            registry.set_effectiveness(foreign, mine, 2.0)

    def test_out_of_range_index(self, registry: TypeRegistry) -> None:
        fire = registry.create("fire")
        bogus = TypeRef(index=7, registry_id=fire.registry_id)
        with pytest.raises(ValueError):
            registry.name_of(bogus)

    def test_rejected_set_leaves_state_untouched(self, registry: TypeRegistry) -> None:
        fire = registry.create("fire")
        foreign = TypeRegistry().create("water")
        with pytest.raises(ValueError):
            registry.set_effectiveness(fire, foreign, 2.0)
        assert registry.overrides_of(fire) == {}
