"""Tests for the objective intensity ranking."""

from blob_sim.sim.models import INTENSITY_RANK, ObjectiveIntensity as OI

DESCENDING = [
    OI.VITAL_AVERSION,
    OI.VITAL_CRAVING,
    OI.MAJOR_AVERSION,
    OI.MAJOR_CRAVING,
    OI.MODERATE_AVERSION,
    OI.MODERATE_CRAVING,
    OI.MINOR_AVERSION,
    OI.MINOR_CRAVING,
]


class TestIntensityRank:
    def test_rank_table_constant(self):
        assert INTENSITY_RANK == {
            OI.MINOR_CRAVING: 1,
            OI.MINOR_AVERSION: 2,
            OI.MODERATE_CRAVING: 3,
            OI.MODERATE_AVERSION: 4,
            OI.MAJOR_CRAVING: 5,
            OI.MAJOR_AVERSION: 6,
            OI.VITAL_CRAVING: 7,
            OI.VITAL_AVERSION: 8,
        }

    def test_every_member_ranked(self):
        assert set(INTENSITY_RANK) == set(OI)

    def test_sorting_follows_rank(self):
        assert sorted(OI, reverse=True) == DESCENDING

    def test_pairwise_comparisons(self):
        assert OI.VITAL_AVERSION > OI.VITAL_CRAVING
        assert OI.MINOR_AVERSION < OI.MODERATE_CRAVING
        assert OI.MAJOR_CRAVING >= OI.MAJOR_CRAVING
        assert not OI.MINOR_CRAVING > OI.MINOR_CRAVING

    def test_is_aversion(self):
        aversions = {i for i in OI if i.is_aversion}
        assert aversions == {OI.MINOR_AVERSION, OI.MODERATE_AVERSION,
                             OI.MAJOR_AVERSION, OI.VITAL_AVERSION}
