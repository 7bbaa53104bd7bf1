"""
시뮬레이션 이벤트를 기록하고 분석하는 로깅 시스템입니다.
"""
from typing import List, Dict, Any, Optional
import json
import time

import pandas as pd

from lotsim.config import SNAPSHOT_INTERVAL

# 로그 엔트리 타입 정의
LogEntry = Dict[str, Any]
SnapshotEntry = Dict[str, Any]

LOG_COLUMNS = ["time", "car", "event", "duration", "forced"]
SNAPSHOT_COLUMNS = ["time", "occupancy", "incoming", "outgoing"]
EVENTS = ("arrive", "park", "park_fail", "depart")


class SimulationLogger:
    """시뮬레이션 이벤트를 기록하고 분석하는 클래스"""

    def __init__(self, capacity: Optional[int] = None, snapshot_interval: int = SNAPSHOT_INTERVAL):
        """
        로거를 초기화합니다.

        Args:
            capacity: 주차장 수용 대수 (점유율 계산용)
            snapshot_interval: 점유 현황을 기록할 간격 (초)
        """
        if snapshot_interval < 1:
            raise ValueError(f"기록 간격은 1초 이상이어야 합니다: {snapshot_interval}")

        self.capacity = capacity
        self.snapshot_interval = snapshot_interval

        # 로그 리스트 초기화
        self.log: List[LogEntry] = []
        self.snapshots: List[SnapshotEntry] = []

        # 통계 초기화
        self.stats = {
            "total_arrivals": 0,
            "successful_parks": 0,
            "failed_parks": 0,
            "total_departures": 0,
            "forced_departures": 0
        }

    def log_event(self, time: int, car: str, event: str,
                  duration: Optional[int] = None, forced: Optional[bool] = None) -> None:
        """
        시뮬레이션 이벤트를 로그에 추가합니다.

        Args:
            time: 이벤트 발생 시간 (시뮬레이션 시간, 초 단위)
            car: 차량 번호
            event: 이벤트 유형 (arrive, park, depart)
            duration: park는 대기 시간, depart는 주차 시간 (초)
            forced: 최대 주차 시간 초과로 인한 출차 여부
        """
        if event not in EVENTS:
            raise ValueError(f"알 수 없는 이벤트 유형입니다: {event}")

        entry: LogEntry = {
            "time": time,
            "car": car,
            "event": event,
            "duration": duration,
            "forced": forced
        }
        self.log.append(entry)
        self.update_stats(event, forced=bool(forced))

    def update_stats(self, event: str, forced: bool = False) -> None:
        """
        통계 정보를 업데이트합니다.

        park_fail은 매 초 발생할 수 있으므로 로그 없이 횟수만 셉니다.
        """
        if event == "arrive":
            self.stats["total_arrivals"] += 1
        elif event == "park":
            self.stats["successful_parks"] += 1
        elif event == "park_fail":
            self.stats["failed_parks"] += 1
        elif event == "depart":
            self.stats["total_departures"] += 1
            if forced:
                self.stats["forced_departures"] += 1

    def should_snapshot(self, time: int) -> bool:
        """해당 시각이 점유 현황 기록 시점인지 확인"""
        return time % self.snapshot_interval == 0

    def record_snapshot(self, time: int, occupancy: int, incoming: int, outgoing: int) -> None:
        """주차장 점유 현황과 대기열 길이를 기록"""
        self.snapshots.append({
            "time": time,
            "occupancy": occupancy,
            "incoming": incoming,
            "outgoing": outgoing
        })

    def get_dataframe(self) -> pd.DataFrame:
        """로그를 판다스 DataFrame으로 변환해 반환합니다."""
        return pd.DataFrame(self.log, columns=LOG_COLUMNS)

    def get_snapshot_dataframe(self) -> pd.DataFrame:
        """점유 현황 기록을 DataFrame으로 반환"""
        return pd.DataFrame(self.snapshots, columns=SNAPSHOT_COLUMNS)

    def get_summary(self) -> Dict[str, Any]:
        """
        시뮬레이션 결과 요약 지표를 계산합니다.

        Returns:
            통계 카운터와 평균 대기/주차 시간, 평균 점유 대수, 점유율, 최대 대기열 길이
        """
        summary: Dict[str, Any] = dict(self.stats)

        df = self.get_dataframe()
        waits = pd.to_numeric(df[df.event == "park"]["duration"])
        dwells = pd.to_numeric(df[df.event == "depart"]["duration"])
        summary["avg_wait_time"] = float(waits.mean()) if not waits.empty else 0.0
        summary["avg_dwell_time"] = float(dwells.mean()) if not dwells.empty else 0.0

        snap = self.get_snapshot_dataframe()
        if snap.empty:
            summary["mean_occupancy"] = 0.0
            summary["max_incoming_queue"] = 0
        else:
            summary["mean_occupancy"] = float(snap["occupancy"].mean())
            summary["max_incoming_queue"] = int(snap["incoming"].max())

        if self.capacity:
            summary["utilization"] = summary["mean_occupancy"] / self.capacity
        else:
            summary["utilization"] = 0.0
        return summary

    def print_summary(self) -> None:
        """시뮬레이션 결과 요약을 출력합니다."""
        summary = self.get_summary()

        print("=== 시뮬레이션 요약 ===")
        print(f"도착 차량 수: {summary['total_arrivals']}대")
        print(f"입차 성공: {summary['successful_parks']}회")
        print(f"입차 실패 (만차): {summary['failed_parks']}회")
        print(f"출차 차량 수: {summary['total_departures']}대 "
              f"(최대 주차 시간 초과 {summary['forced_departures']}대)")
        print(f"평균 대기 시간: {summary['avg_wait_time'] / 60:.2f}분")
        print(f"평균 주차 시간: {summary['avg_dwell_time'] / 60:.2f}분")
        print(f"평균 점유 대수: {summary['mean_occupancy']:.2f}대")
        print(f"평균 점유율: {summary['utilization'] * 100:.2f}%")
        print(f"최대 대기열 길이: {summary['max_incoming_queue']}대")

    def save_to_csv(self, filename: Optional[str] = None) -> str:
        """로그 데이터를 CSV 파일로 저장"""
        if filename is None:
            filename = f"simulation_log_{int(time.time())}.csv"
        self.get_dataframe().to_csv(filename, index=False)
        return filename

    def save_snapshots_to_csv(self, filename: str) -> str:
        """점유 현황 기록을 CSV 파일로 저장"""
        self.get_snapshot_dataframe().to_csv(filename, index=False)
        return filename

    def save_stats(self, filename: str) -> None:
        """통계 정보를 JSON 파일로 저장"""
        with open(filename, 'w', encoding='utf-8') as f:
            json.dump(self.get_summary(), f, ensure_ascii=False, indent=2)
