"""Tests for OrderingEngine moves and confirmed removals."""

import pytest

from wiki_uploader.assets import AssetStateStore, OrderingEngine
from wiki_uploader.constants import AssetRole, REMOVE_ASSET_CONFIRMATIONS
from wiki_uploader.errors import UnknownAssetError


@pytest.fixture
def store():
    return AssetStateStore()


@pytest.fixture
def gallery(store):
    """Gallery of four local pieces: A, B, C, D."""
    return [store.add(AssetRole.GALLERY, name.encode(), "image/png", filename=name) for name in "ABCD"]


def names(store):
    return [a.filename for a in store.list(AssetRole.GALLERY)]


class TestMove:
    """Tests for swapping gallery positions."""

    def test_move_down_swaps_with_neighbour(self, store, gallery):
        engine = OrderingEngine(store)
        assert engine.move_down(gallery[0].id) == 1
        assert names(store) == ["B", "A", "C", "D"]

    def test_move_up(self, store, gallery):
        engine = OrderingEngine(store)
        assert engine.move_up(gallery[2].id) == 1
        assert names(store) == ["A", "C", "B", "D"]

    def test_move_is_a_swap_not_a_shift(self, store, gallery):
        engine = OrderingEngine(store)
        engine.move(gallery[0].id, 2)
        # B keeps its slot; only A and C are exchanged
        assert names(store) == ["C", "B", "A", "D"]

    def test_move_clamps_to_bounds(self, store, gallery):
        engine = OrderingEngine(store)
        assert engine.move(gallery[1].id, 10) == 3
        assert names(store) == ["A", "D", "C", "B"]

    def test_move_past_top_is_noop(self, store, gallery):
        engine = OrderingEngine(store)
        events = []
        store.subscribe(lambda event, asset: events.append(event))

        assert engine.move_up(gallery[0].id) == 0
        assert names(store) == ["A", "B", "C", "D"]
        assert events == []

    def test_positions_stay_contiguous(self, store, gallery):
        engine = OrderingEngine(store)
        engine.move(gallery[3].id, -2)
        engine.move_down(gallery[0].id)
        assert [a.position for a in store.list(AssetRole.GALLERY)] == [0, 1, 2, 3]

    def test_move_singleton_rejected(self, store, gallery):
        thumb = store.add(AssetRole.THUMBNAIL, b"t", "image/png")
        with pytest.raises(ValueError):
            OrderingEngine(store).move_down(thumb.id)

    def test_move_unknown_asset(self, store, gallery):
        with pytest.raises(UnknownAssetError):
            OrderingEngine(store).move_down("missing")


class TestRemove:
    """Tests for removals gated by two confirmations."""

    def test_remove_after_both_confirmations(self, store, gallery):
        prompts = []

        def confirm(message):
            prompts.append(message)
            return True

        engine = OrderingEngine(store, confirm=confirm)
        assert engine.remove(gallery[1].id) is True

        assert prompts == list(REMOVE_ASSET_CONFIRMATIONS)
        assert names(store) == ["A", "C", "D"]
        assert [a.position for a in store.list(AssetRole.GALLERY)] == [0, 1, 2]

    def test_second_refusal_keeps_asset(self, store, gallery):
        answers = iter([True, False])
        engine = OrderingEngine(store, confirm=lambda message: next(answers))

        assert engine.remove(gallery[1].id) is False
        assert names(store) == ["A", "B", "C", "D"]

    def test_without_confirm_callback_nothing_is_removed(self, store, gallery):
        assert OrderingEngine(store).remove(gallery[0].id) is False
        assert len(store) == 4

    def test_unknown_asset_fails_before_prompting(self, store, gallery):
        prompts = []
        engine = OrderingEngine(store, confirm=lambda message: prompts.append(message) or True)

        with pytest.raises(UnknownAssetError):
            engine.remove("missing")
        assert prompts == []

    def test_remove_singleton(self, store):
        logo = store.add(AssetRole.LOGO, b"logo", "image/png")
        engine = OrderingEngine(store, confirm=lambda message: True)

        assert engine.remove(logo.id) is True
        assert store.singleton(AssetRole.LOGO) is None
