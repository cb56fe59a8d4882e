"""Tests for CollectibleSet."""
from tick_chase import REFERENCE_LAYOUT, CollectibleSet, MazeGrid, Tier

ROWS = [
    "11111",
    "12031",
    "14021",
    "11111",
]


def make():
    return CollectibleSet.from_maze(MazeGrid.from_rows(ROWS), 3.0, 6.0)


class TestFromMaze:
    """Building the set from maze cells."""

    def test_one_item_per_cell(self):
        """Each standard and bonus cell gets one item at its centre."""
        items = make()
        assert len(items) == 3
        assert [(c.position, c.tier) for c in items] == [
            ((30.0, 30.0), Tier.STANDARD),
            ((70.0, 30.0), Tier.BONUS),
            ((70.0, 50.0), Tier.STANDARD),
        ]

    def test_radius_by_tier(self):
        """Radius follows the tier."""
        items = make()
        assert {c.radius for c in items.of_tier(Tier.STANDARD)} == {3.0}
        assert {c.radius for c in items.of_tier(Tier.BONUS)} == {6.0}

    def test_home_and_open_cells_carry_nothing(self):
        """Open and home cells hold no items."""
        items = make()
        assert (30.0, 50.0) not in [c.position for c in items]

    def test_reference_counts(self):
        """The reference maze holds 240 standard and 4 bonus items."""
        items = CollectibleSet.from_maze(REFERENCE_LAYOUT.build_maze(20), 3.0, 6.0)
        assert items.remaining(Tier.STANDARD) == 240
        assert items.remaining(Tier.BONUS) == 4


class TestConsumption:
    """One-way consumption."""

    def test_consume_once(self):
        """A second consume of one item is refused."""
        items = make()
        first = next(iter(items))
        assert items.consume(first)
        assert not items.consume(first)
        assert first.consumed
        assert items.remaining() == 2
        assert items.remaining(Tier.STANDARD) == 1

    def test_all_consumed(self):
        """all_consumed turns true after the last item."""
        items = make()
        assert not items.all_consumed()
        for item in items:
            items.consume(item)
        assert items.all_consumed()
        assert items.remaining() == 0

    def test_empty_set_is_cleared(self):
        """An empty set counts as cleared."""
        assert CollectibleSet([]).all_consumed()

    def test_reset(self):
        """reset restores every item."""
        items = make()
        for item in items:
            items.consume(item)
        items.reset()
        assert items.remaining() == 3
