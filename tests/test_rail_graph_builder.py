"""Tests for building the rail graph from feed tables."""

from hk_transit_optimizer.application.routing.rail_graph_builder import (
    build_rail_graph,
    station_code_for,
)
from hk_transit_optimizer.domain.models import (
    FeedTables,
    RailGraph,
    RailGraphSettings,
    RouteRecord,
    StopRecord,
    StopTimeRecord,
    TripRecord,
)


def _tables(events: list[tuple[str, str, int, int, int]]) -> FeedTables:
    """Feed with one rail route and the given (trip, stop, seq, arr, dep) events."""
    stop_ids = sorted({e[1] for e in events})
    trip_ids = sorted({e[0] for e in events})
    return FeedTables(
        stops=tuple(StopRecord(s, s, 22.3, 114.2) for s in stop_ids),
        routes=(RouteRecord("R", "1"),),
        trips=tuple(TripRecord(t, "R") for t in trip_ids),
        stop_times=tuple(StopTimeRecord(t, s, seq, arr, dep) for t, s, seq, arr, dep in events),
    )


class TestStationCode:
    """Tests for deriving station codes from platform ids."""

    def test_when_plain_id_then_code_follows_prefix(self) -> None:
        """Given MTR-WTS, when extracting, then the code is WTS."""
        assert station_code_for("MTR-WTS") == "WTS"

    def test_when_platform_suffix_then_suffix_is_ignored(self) -> None:
        """Given MTR-DIH-2, when extracting, then the code is DIH."""
        assert station_code_for("MTR-DIH-2") == "DIH"

    def test_when_other_prefix_then_no_code(self) -> None:
        """Given a bus stop id, when extracting, then there is no code."""
        assert station_code_for("BUS-1") is None
        assert station_code_for("MTR-") is None


class TestBuildRailGraph:
    """Tests for build_rail_graph against the sample feed and small feeds."""

    def test_when_sample_feed_then_only_rail_stops_are_kept(self, rail_graph: RailGraph) -> None:
        """Given a feed with bus and rail stops, when building, then only rail platforms remain."""
        assert "BUS-1" not in rail_graph.stops
        assert set(rail_graph.platforms_by_code) == {"WTS", "DIH", "KAT", "KWT", "TST", "ETS"}
        assert rail_graph.platforms("DIH") == ("MTR-DIH-1", "MTR-DIH-2")

    def test_when_consecutive_events_then_edge_is_arrival_minus_departure(
        self, rail_graph: RailGraph
    ) -> None:
        """Given WTS departing 06:00:30 and DIH-1 arriving 06:02:30, then the edge is 120s."""
        assert rail_graph.edge_seconds("MTR-WTS", "MTR-DIH-1") == 120
        assert rail_graph.edge_seconds("MTR-DIH-1", "MTR-KWT") == 420

    def test_when_edge_added_then_reverse_edge_has_same_weight(self, rail_graph: RailGraph) -> None:
        """Given a one-direction trip, when building, then the reverse arc exists too."""
        assert rail_graph.edge_seconds("MTR-DIH-1", "MTR-WTS") == 120
        assert rail_graph.edge_seconds("MTR-KAT", "MTR-DIH-2") == 120

    def test_when_station_has_two_platforms_then_transfer_edges_are_symmetric(
        self, rail_graph: RailGraph
    ) -> None:
        """Given two DIH platforms, when building, then they are linked both ways at 180s."""
        assert rail_graph.edge_seconds("MTR-DIH-1", "MTR-DIH-2") == 180
        assert rail_graph.edge_seconds("MTR-DIH-2", "MTR-DIH-1") == 180

    def test_when_walkway_codes_configured_then_walkway_edges_exist(
        self, rail_graph: RailGraph
    ) -> None:
        """Given TST and ETS, when building, then a 300s walkway links them both ways."""
        assert rail_graph.edge_seconds("MTR-TST", "MTR-ETS") == 300
        assert rail_graph.edge_seconds("MTR-ETS", "MTR-TST") == 300

    def test_when_walkway_disabled_then_no_walkway_edges(self) -> None:
        """Given no walkway codes, when building, then TST and ETS stay unlinked."""
        from tests.helpers import sample_feed_tables

        graph = build_rail_graph(sample_feed_tables(), RailGraphSettings(walkway_codes=None))

        assert graph.edge_seconds("MTR-TST", "MTR-ETS") is None

    def test_when_bus_trip_visits_rail_stop_then_it_adds_no_edges(
        self, rail_graph: RailGraph
    ) -> None:
        """Given a bus trip that passes MTR-WTS, when building, then WTS gains no bus edges."""
        neighbours = {stop for stop, _ in rail_graph.neighbours("MTR-WTS")}

        assert neighbours == {"MTR-DIH-1"}

    def test_when_same_arc_proposed_twice_then_minimum_weight_wins(self) -> None:
        """Given two trips over the same hop, when building, then the faster one is kept."""
        tables = _tables(
            [
                ("T1", "MTR-AAA", 1, 0, 0),
                ("T1", "MTR-BBB", 2, 200, 200),
                ("T2", "MTR-BBB", 1, 1000, 1000),
                ("T2", "MTR-AAA", 2, 1150, 1150),
            ]
        )

        graph = build_rail_graph(tables, RailGraphSettings(walkway_codes=None))

        assert graph.edge_seconds("MTR-AAA", "MTR-BBB") == 150
        assert graph.edge_seconds("MTR-BBB", "MTR-AAA") == 150

    def test_when_gap_is_implausible_then_no_edge(self) -> None:
        """Given a zero, negative or hour-long gap, when building, then no edge is added."""
        tables = _tables(
            [
                ("T1", "MTR-AAA", 1, 0, 0),
                ("T1", "MTR-BBB", 2, 0, 0),
                ("T1", "MTR-CCC", 3, 3600, 3600),
                ("T2", "MTR-DDD", 1, 500, 500),
                ("T2", "MTR-EEE", 2, 400, 400),
            ]
        )

        graph = build_rail_graph(tables, RailGraphSettings(walkway_codes=None))

        assert graph.edge_count == 0

    def test_when_events_out_of_order_then_sorted_by_sequence(self) -> None:
        """Given stop events listed out of sequence, when building, then hops follow sequence."""
        tables = _tables(
            [
                ("T1", "MTR-CCC", 3, 300, 300),
                ("T1", "MTR-AAA", 1, 0, 0),
                ("T1", "MTR-BBB", 2, 100, 120),
            ]
        )

        graph = build_rail_graph(tables, RailGraphSettings(walkway_codes=None))

        assert graph.edge_seconds("MTR-AAA", "MTR-BBB") == 100
        assert graph.edge_seconds("MTR-BBB", "MTR-CCC") == 180
        assert graph.edge_seconds("MTR-AAA", "MTR-CCC") is None
