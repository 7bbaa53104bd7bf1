"""SimulationLogger 기록/요약 테스트"""
import json

import pytest

from lotsim.utils.logger import SimulationLogger


class TestSimulationLogger:

    def make_logger(self):
        logger = SimulationLogger(capacity=4, snapshot_interval=10)
        logger.log_event(time=0, car="AAA", event="arrive")
        logger.log_event(time=3, car="AAA", event="park", duration=3)
        logger.log_event(time=5, car="BBB", event="arrive")
        logger.log_event(time=5, car="BBB", event="park", duration=0)
        logger.log_event(time=100, car="AAA", event="depart", duration=100, forced=False)
        logger.log_event(time=200, car="BBB", event="depart", duration=195, forced=True)
        logger.update_stats("park_fail")
        logger.record_snapshot(time=0, occupancy=0, incoming=1, outgoing=0)
        logger.record_snapshot(time=10, occupancy=2, incoming=3, outgoing=0)
        return logger

    def test_counters(self):
        stats = self.make_logger().stats

        assert stats["total_arrivals"] == 2
        assert stats["successful_parks"] == 2
        assert stats["failed_parks"] == 1
        assert stats["total_departures"] == 2
        assert stats["forced_departures"] == 1

    def test_summary_metrics(self):
        summary = self.make_logger().get_summary()

        assert summary["avg_wait_time"] == pytest.approx(1.5)
        assert summary["avg_dwell_time"] == pytest.approx(147.5)
        assert summary["mean_occupancy"] == pytest.approx(1.0)
        assert summary["utilization"] == pytest.approx(0.25)
        assert summary["max_incoming_queue"] == 3

    def test_empty_summary(self):
        summary = SimulationLogger().get_summary()

        assert summary["total_arrivals"] == 0
        assert summary["avg_wait_time"] == 0.0
        assert summary["mean_occupancy"] == 0.0
        assert summary["utilization"] == 0.0

    def test_unknown_event_rejected(self):
        with pytest.raises(ValueError):
            SimulationLogger().log_event(time=0, car="AAA", event="teleport")

    def test_invalid_snapshot_interval(self):
        with pytest.raises(ValueError):
            SimulationLogger(snapshot_interval=0)

    def test_should_snapshot(self):
        logger = SimulationLogger(snapshot_interval=60)
        assert logger.should_snapshot(0)
        assert logger.should_snapshot(120)
        assert not logger.should_snapshot(61)

    def test_dataframes(self):
        logger = self.make_logger()

        df = logger.get_dataframe()
        assert list(df.columns) == ["time", "car", "event", "duration", "forced"]
        assert len(df) == 6
        assert len(logger.get_snapshot_dataframe()) == 2

    def test_save_outputs(self, tmp_path):
        logger = self.make_logger()

        csv_path = logger.save_to_csv(str(tmp_path / "log.csv"))
        logger.save_snapshots_to_csv(str(tmp_path / "snapshots.csv"))
        logger.save_stats(str(tmp_path / "stats.json"))

        assert (tmp_path / "log.csv").exists()
        assert csv_path.endswith("log.csv")
        assert (tmp_path / "snapshots.csv").read_text().startswith("time,occupancy,incoming,outgoing")
        with open(tmp_path / "stats.json", encoding="utf-8") as f:
            stats = json.load(f)
        assert stats["forced_departures"] == 1
        assert stats["max_incoming_queue"] == 3

    def test_print_summary(self, capsys):
        self.make_logger().print_summary()
        out = capsys.readouterr().out
        assert "시뮬레이션 요약" in out
        assert "25.00%" in out
