"""Tests for the flat and hierarchical consensus reducers."""

from __future__ import annotations

from types import MappingProxyType

from feature_finder.features.models import Axis, FeatureValue
from feature_finder.features.reducers import (
    merge_flat,
    merge_hierarchical,
    reduce_flat,
    reduce_hierarchical,
)
from feature_finder.features.tables import table_for

PLACE = table_for(Axis.PLACE)
MANNER = table_for(Axis.MANNER)
VOICING = table_for(Axis.VOICING)
DIPHTHONG = table_for(Axis.DIPHTHONG)


class TestMergeHierarchical:
    def test_general_match_drops_specific(self):
        merged = merge_hierarchical(
            FeatureValue("Labial", "Bilabial"), FeatureValue("Labial", "Labiodental")
        )
        assert merged == FeatureValue("Labial")

    def test_specific_match(self):
        merged = merge_hierarchical(FeatureValue("A", "X"), FeatureValue("B", "X"))
        assert merged == FeatureValue("X")

    def test_consensus_specific_matches_new_general(self):
        merged = merge_hierarchical(FeatureValue("Labial", "Velar"), FeatureValue("Velar"))
        assert merged == FeatureValue("Velar")

    def test_new_specific_matches_consensus_general(self):
        merged = merge_hierarchical(FeatureValue("Velar"), FeatureValue("Labial", "Velar"))
        assert merged == FeatureValue("Velar")

    def test_no_relation(self):
        assert merge_hierarchical(FeatureValue("Dental"), FeatureValue("Velar")) is None
        assert merge_hierarchical(
            FeatureValue("Labial", "Bilabial"), FeatureValue("Dental")
        ) is None


class TestMergeFlat:
    def test_equal(self):
        assert merge_flat(FeatureValue("Voiced"), FeatureValue("Voiced")) == FeatureValue("Voiced")

    def test_different(self):
        assert merge_flat(FeatureValue("Voiced"), FeatureValue("Voiceless")) is None


class TestReduceFlat:
    def test_all_equal(self):
        assert reduce_flat([1, 4, 6], VOICING) == "Voiceless"

    def test_single_symbol(self):
        assert reduce_flat([2], VOICING) == "Voiced"

    def test_mismatch(self):
        assert reduce_flat([1, 2], VOICING) is None

    def test_out_of_range_aborts(self):
        assert reduce_flat([1, 30], VOICING) is None
        assert reduce_flat([30, 1], VOICING) is None

    def test_empty_sequence(self):
        assert reduce_flat([], VOICING) is None


class TestReduceHierarchical:
    def test_general_labels_match(self):
        assert reduce_hierarchical([1, 4], PLACE) == "Labial"
        assert reduce_hierarchical([1, 23], PLACE) == "Labial"

    def test_specific_to_general(self):
        # w is Labial refined by Velar; k is Velar
        assert reduce_hierarchical([23, 20], PLACE) == "Velar"
        assert reduce_hierarchical([20, 23], PLACE) == "Velar"
        assert reduce_hierarchical([23, 20, 22], PLACE) == "Velar"

    def test_nasal_and_stop_share_stop(self):
        assert reduce_hierarchical([3, 1], MANNER) == "Stop"
        assert reduce_hierarchical([1, 3], MANNER) == "Stop"
        assert reduce_hierarchical([3, 10], MANNER) == "Nasal"

    def test_specific_match_across_generals(self):
        table = MappingProxyType({1: FeatureValue("A", "X"), 2: FeatureValue("B", "X")})
        assert reduce_hierarchical([1, 2], table) == "X"

    def test_reports_general_of_single_symbol(self):
        assert reduce_hierarchical([3], MANNER) == "Nasal"
        assert reduce_hierarchical([13], DIPHTHONG) == "Diphthong"

    def test_diphthong_subtypes_agree_on_diphthong(self):
        assert reduce_hierarchical([5, 13], DIPHTHONG) == "Diphthong"

    def test_simple_and_diphthong_conflict(self):
        assert reduce_hierarchical([5, 1], DIPHTHONG) is None

    def test_order_dependence(self):
        """Folding is pairwise, so reordering can change the outcome."""
        assert reduce_hierarchical([3, 1, 10], MANNER) == "Stop"
        assert reduce_hierarchical([3, 10, 1], MANNER) is None

    def test_discarded_specific_cannot_match_later(self):
        # w alone matches k through its Velar refinement, but not after
        # merging with p has coarsened the consensus to Labial
        assert reduce_hierarchical([23, 20], PLACE) == "Velar"
        assert reduce_hierarchical([23, 1, 20], PLACE) is None

    def test_out_of_range_aborts(self):
        assert reduce_hierarchical([1, 26], PLACE) is None
        assert reduce_hierarchical([0], PLACE) is None
