"""
도착률에 맞는 최소 주차면 수를 찾는 모듈
"""
import time
from typing import Dict, List, Optional, Any

import numpy as np
import pandas as pd

from lotsim.config import SEED, NUM_RUNS, QUEUE_THRESHOLD, SIMULATION_DURATION
from lotsim.models.parking_lot import ParkingLot
from lotsim.simulation.simulator import Simulator
from lotsim.utils.random_generator import RandomGenerator


class CapacityOptimizer:
    """
    주차면 수를 1부터 늘려가며 시뮬레이션을 반복하고,
    시뮬레이션 종료 시점의 평균 입차 대기열 길이가 기준 이하가 되는 최소 주차면 수를 찾습니다.
    """

    def __init__(self,
                 hourly_rate: int,
                 num_runs: int = NUM_RUNS,
                 threshold: float = QUEUE_THRESHOLD,
                 steps: int = SIMULATION_DURATION,
                 seed: Optional[int] = SEED,
                 verbose: bool = True):
        """
        Args:
            hourly_rate: 시간당 평균 도착 차량 수
            num_runs: 주차면 수별 시뮬레이션 반복 횟수
            threshold: 허용 가능한 평균 대기열 길이
            steps: 시뮬레이션 1회의 시간 (초)
            seed: 기준 시드 (반복 i회차는 seed + i 사용, None이면 무작위)
            verbose: 진행 상황 출력 여부
        """
        if hourly_rate < 0:
            raise ValueError(f"도착률은 음수일 수 없습니다: {hourly_rate}")
        if num_runs < 1:
            raise ValueError(f"반복 횟수는 1 이상이어야 합니다: {num_runs}")
        if threshold < 0:
            raise ValueError(f"대기열 기준값은 음수일 수 없습니다: {threshold}")

        self.hourly_rate = hourly_rate
        self.num_runs = num_runs
        self.threshold = threshold
        self.steps = steps
        self.seed = seed
        self.verbose = verbose

        # (capacity, run, queue_length, elapsed_ms) 기록
        self.history: List[Dict[str, Any]] = []

    def _make_random_source(self, run_index: int) -> RandomGenerator:
        """반복 회차별 난수 생성기 (주차면 수가 달라도 같은 회차는 같은 시드)"""
        if self.seed is None:
            return RandomGenerator()
        return RandomGenerator(self.seed + run_index)

    def run_capacity(self, capacity: int) -> float:
        """
        주어진 주차면 수로 num_runs번 시뮬레이션하고 평균 대기열 길이를 반환합니다.

        Args:
            capacity: 주차면 수

        Returns:
            float: 종료 시점 입차 대기열 길이의 평균
        """
        if self.verbose:
            print(f"==== Setting lot capacity to: {capacity} ====")

        queue_lengths = []
        for run_index in range(self.num_runs):
            lot = ParkingLot(capacity)
            sim = Simulator(lot, self.hourly_rate, self.steps,
                            random_source=self._make_random_source(run_index))

            start = time.perf_counter()
            sim.simulate()
            elapsed_ms = (time.perf_counter() - start) * 1000

            queue_length = sim.get_incoming_queue_size()
            queue_lengths.append(queue_length)
            self.history.append({
                "capacity": capacity,
                "run": run_index + 1,
                "queue_length": queue_length,
                "elapsed_ms": elapsed_ms
            })

            if self.verbose:
                print(f"Simulation run {run_index + 1} ({elapsed_ms:.0f}ms); "
                      f"Queue length at the end of simulation run: {queue_length}")

        return float(np.mean(queue_lengths))

    def get_optimal_number_of_spots(self) -> int:
        """
        평균 대기열 길이가 threshold 이하가 되는 최소 주차면 수를 찾습니다.

        Returns:
            int: 최소 주차면 수
        """
        capacity = 1
        while True:
            average = self.run_capacity(capacity)
            if average <= self.threshold:
                if self.verbose:
                    print(f"[INFO] 평균 대기열 길이 {average:.2f}대 <= {self.threshold}: "
                          f"최적 주차면 수 {capacity}면")
                return capacity
            capacity += 1

    def get_results_dataframe(self) -> pd.DataFrame:
        """반복 실행 기록을 DataFrame으로 반환"""
        return pd.DataFrame(self.history, columns=["capacity", "run", "queue_length", "elapsed_ms"])
