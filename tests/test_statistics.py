#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
SeedWeaver v0.1.0

Tests for expansion statistics.

Author: SeedWeaver Development Team
License: Dual License (Academic/Commercial) - See LICENSE_ACADEMIC.md and LICENSE_COMMERCIAL.md
"""

import pytest

from seedweaver.traversal_utils import StatisticsCollector, degree_bucket


class TestDegreeBuckets:
    """Test histogram bucket boundaries."""

    @pytest.mark.parametrize("degree, bucket", [
        (0, "1-5"),
        (1, "1-5"),
        (5, "1-5"),
        (6, "6-10"),
        (10, "6-10"),
        (11, "11-50"),
        (50, "11-50"),
        (51, "51-100"),
        (100, "51-100"),
        (101, "101-500"),
        (500, "101-500"),
        (501, "501-1000"),
        (1000, "501-1000"),
        (1001, "1000+"),
    ])
    def test_bucket_edges(self, degree, bucket):
        """Test that bucket upper bounds are inclusive."""
        assert degree_bucket(degree) == bucket


class TestStatisticsCollector:
    """Test counters, summary and freezing."""

    def test_distribution_in_bucket_order(self):
        """Test that only non-empty buckets appear, in ascending order."""
        collector = StatisticsCollector()
        for degree in [2000, 3, 3, 60]:
            collector.record_expansion(degree)

        assert list(collector.degree_distribution.items()) == [
            ("1-5", 2), ("51-100", 1), ("1000+", 1),
        ]
        assert collector.nodes_expanded == 4

    def test_summary(self):
        """Test mean, median and max of expanded degrees."""
        collector = StatisticsCollector()
        for degree in [1, 2, 3, 10]:
            collector.record_expansion(degree)

        summary = collector.summary()
        assert summary["mean_degree"] == pytest.approx(4.0)
        assert summary["median_degree"] == pytest.approx(2.5)
        assert summary["max_degree"] == 10

    def test_empty_summary(self):
        """Test the summary before anything is expanded."""
        assert StatisticsCollector().summary() == {
            'mean_degree': 0.0, 'median_degree': 0.0, 'max_degree': 0,
        }

    def test_freeze(self):
        """Test that freeze copies every counter into ExpansionStats."""
        collector = StatisticsCollector()
        assert collector.record_iteration() == 1
        collector.record_expansion(4)
        collector.record_edge()
        collector.record_edge()
        collector.record_path()
        collector.record_duplicate()
        collector.record_looping_path()
        collector.record_reconstruction_failure()

        stats = collector.freeze()
        assert stats.iterations == 1
        assert stats.nodes_expanded == 1
        assert stats.edges_traversed == 2
        assert stats.paths_found == 1
        assert stats.duplicate_paths == 1
        assert stats.looping_paths == 1
        assert stats.reconstruction_failures == 1
        assert dict(stats.degree_distribution) == {"1-5": 1}

        # Later recording does not leak into the frozen stats
        collector.record_expansion(4)
        assert stats.degree_distribution["1-5"] == 1
        assert stats.to_dict()["degree_summary"]["max_degree"] == 4

# SeedWeaver v0.1.0
# Any usage is subject to this software's license.
