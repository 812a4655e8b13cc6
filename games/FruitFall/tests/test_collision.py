"""
Tests for the mark-then-filter collision scans.
"""
from models import Resolution
from models.fruitfall import HazardType
from games.FruitFall.collision import compact, find_floor_hits, find_hits
from games.FruitFall.entity import Appearance
from games.FruitFall.entities import Hazard, Knife


PLAYFIELD = Resolution(width=800, height=500)


def fruit(x, y):
    return Hazard(PLAYFIELD, HazardType.FRUIT, x, y, 40, 40, 0.0, Appearance((200, 0, 0)))


def bomb(x, y):
    return Hazard(PLAYFIELD, HazardType.BOMB, x, y, 40, 40, 0.0, Appearance((0, 0, 0)))


class TestFindHits:
    """Test pairwise knife/hazard marking."""

    def test_marks_both_entities(self):
        knife = Knife(PLAYFIELD, 100, 100)
        target = fruit(100, 100)
        hits = find_hits([knife], [target])
        assert hits == [(knife, target)]
        assert knife.consumed
        assert target.consumed

    def test_no_hit_leaves_entities_alone(self):
        knife = Knife(PLAYFIELD, 100, 100)
        target = fruit(300, 100)
        assert find_hits([knife], [target]) == []
        assert not knife.consumed
        assert not target.consumed

    def test_one_knife_matches_two_hazards_in_one_pass(self):
        """Removal waits for compaction, so both overlaps count."""
        knife = Knife(PLAYFIELD, 100, 100)
        first = fruit(90, 100)
        second = fruit(105, 110)
        hits = find_hits([knife], [first, second])
        assert hits == [(knife, first), (knife, second)]
        assert first.consumed and second.consumed

    def test_two_knives_on_one_hazard_both_count(self):
        a = Knife(PLAYFIELD, 100, 100)
        b = Knife(PLAYFIELD, 110, 100)
        target = fruit(100, 100)
        hits = find_hits([a, b], [target])
        assert len(hits) == 2

    def test_knife_major_order(self):
        k1 = Knife(PLAYFIELD, 100, 100)
        k2 = Knife(PLAYFIELD, 300, 100)
        f1 = fruit(300, 100)
        f2 = fruit(100, 100)
        hits = find_hits([k1, k2], [f1, f2])
        assert hits == [(k1, f2), (k2, f1)]


class TestFloorHits:
    """Test bomb/floor marking."""

    def test_bomb_on_floor_is_marked(self):
        landed = bomb(200, 460)
        airborne = bomb(300, 100)
        assert find_floor_hits([landed, airborne]) == [landed]
        assert landed.consumed
        assert not airborne.consumed

    def test_already_consumed_bomb_not_counted_twice(self):
        landed = bomb(200, 470)
        landed.mark_consumed()
        assert find_floor_hits([landed]) == []


class TestCompact:
    """Test filtering of consumed and out-of-bounds entities."""

    def test_drops_consumed(self):
        keep = fruit(10, 10)
        gone = fruit(60, 10)
        gone.mark_consumed()
        assert compact([keep, gone]) == [keep]

    def test_drops_out_of_bounds(self):
        keep_knife = Knife(PLAYFIELD, 10, 10)
        high_knife = Knife(PLAYFIELD, 10, -40)
        low_fruit = fruit(10, 501)
        assert compact([keep_knife, high_knife]) == [keep_knife]
        assert compact([low_fruit]) == []

    def test_preserves_order(self):
        items = [fruit(x, 10) for x in (0, 100, 200, 300)]
        items[1].mark_consumed()
        assert compact(items) == [items[0], items[2], items[3]]
