"""
주차장 점유 시뮬레이션을 1초 단위로 실행하는 모듈
"""
from fractions import Fraction
from typing import Optional

import simpy

from lotsim.config import (
    SEED, NUM_SECONDS_IN_1H, MAX_PARKING_DURATION, PLATE_NUM_LENGTH
)
from lotsim.models.linked_queue import LinkedQueue
from lotsim.models.parking_lot import ParkingLot, LotFullError
from lotsim.models.spot import Spot
from lotsim.utils.distributions import TriangularDistribution
from lotsim.utils.logger import SimulationLogger
from lotsim.utils.random_generator import RandomGenerator


class Simulator:
    """
    주차장 시뮬레이션 엔진

    매 초마다 다음 순서로 처리합니다.
        1. 새 차량 도착 샘플링 (입차 대기열에 추가)
        2. 주차된 차량의 출차 판정 (출차 대기열로 이동)
        3. 입차 대기열 맨 앞 차량의 입차 시도 (초당 1회)
        4. 시계 1초 증가
    """

    def __init__(self,
                 lot: ParkingLot,
                 per_hour_arrival_rate: int,
                 steps: int,
                 random_source: Optional[RandomGenerator] = None,
                 departure_pdf: Optional[TriangularDistribution] = None,
                 logger: Optional[SimulationLogger] = None,
                 max_parking_duration: int = MAX_PARKING_DURATION):
        """
        시뮬레이션 객체를 초기화합니다.

        Args:
            lot: 시뮬레이션할 주차장
            per_hour_arrival_rate: 시간당 평균 도착 차량 수
            steps: 시뮬레이션 총 시간 (초)
            random_source: event_occurred, generate_random_car를 제공하는 난수 생성기
            departure_pdf: 주차 시간에 따른 출차 확률 밀도 (pdf 제공)
            logger: 이벤트 기록용 로거 (없으면 기록하지 않음)
            max_parking_duration: 최대 주차 가능 시간 (초)
        """
        if per_hour_arrival_rate < 0:
            raise ValueError(f"도착률은 음수일 수 없습니다: {per_hour_arrival_rate}")
        if per_hour_arrival_rate > NUM_SECONDS_IN_1H:
            raise ValueError(
                f"도착률은 시간당 {NUM_SECONDS_IN_1H}대를 넘을 수 없습니다: {per_hour_arrival_rate}")
        if steps < 0:
            raise ValueError(f"시뮬레이션 시간은 음수일 수 없습니다: {steps}")
        if max_parking_duration < 0:
            raise ValueError(f"최대 주차 시간은 음수일 수 없습니다: {max_parking_duration}")
        # 기본 삼각 분포의 최댓값은 2 / max_parking_duration 이므로 2초 이상이어야 확률로 쓸 수 있음
        if departure_pdf is None and max_parking_duration < 2:
            raise ValueError(
                f"기본 출차 분포를 쓰려면 최대 주차 시간이 2초 이상이어야 합니다: {max_parking_duration}")

        self.lot = lot
        self.steps = steps
        self.max_parking_duration = max_parking_duration

        # 초당 도착 확률 (정확한 분수)
        self.probability_of_arrival_per_sec = Fraction(per_hour_arrival_rate, NUM_SECONDS_IN_1H)

        self.random_source = random_source if random_source is not None else RandomGenerator(SEED)
        if departure_pdf is None:
            departure_pdf = TriangularDistribution(0, max_parking_duration // 2, max_parking_duration)
        self.departure_pdf = departure_pdf
        self.logger = logger

        # 입차/출차 대기열
        self.incoming_queue = LinkedQueue()
        self.outgoing_queue = LinkedQueue()

        # SimPy 환경의 현재 시각이 시뮬레이션 시계 역할을 함
        self.env = simpy.Environment()
        self._finished = False

    @property
    def clock(self) -> int:
        """현재 시뮬레이션 시각 (초)"""
        return int(self.env.now)

    def simulate(self) -> None:
        """
        steps에 도달할 때까지 시뮬레이션을 실행합니다.
        한 번 실행이 끝난 객체는 다시 실행할 수 없습니다.
        """
        if self._finished:
            raise RuntimeError("이미 실행이 끝난 시뮬레이션입니다.")
        self._finished = True

        self.env.process(self._run())
        self.env.run()

        if self.logger is not None:
            self._record_snapshot()

    def _run(self):
        """1초 단위 시뮬레이션 프로세스"""
        while self.clock < self.steps:
            if self.logger is not None and self.logger.should_snapshot(self.clock):
                self._record_snapshot()

            self._process_arrival()
            self._process_departures()
            self._process_admission()

            # 시계 1초 증가
            yield self.env.timeout(1)

    def _process_arrival(self) -> None:
        """이번 초에 새 차량이 도착했는지 샘플링"""
        if self.random_source.event_occurred(self.probability_of_arrival_per_sec):
            spot = Spot(self.random_source.generate_random_car(PLATE_NUM_LENGTH), self.clock)
            self.incoming_queue.enqueue(spot)
            if self.logger is not None:
                self.logger.log_event(time=self.clock, car=spot.car, event="arrive")

    def _process_departures(self) -> None:
        """
        주차된 모든 차량에 대해 출차 여부를 판정합니다.

        차량을 제거하면 뒤쪽 차량이 한 칸씩 당겨지므로 같은 인덱스를 다시 확인합니다.
        """
        i = 0
        while i < self.lot.get_occupancy():
            spot = self.lot.get_spot_at(i)
            duration = self.clock - spot.timestamp

            forced = duration > self.max_parking_duration
            if forced:
                will_leave = True
            else:
                # 확률 밀도 값을 그대로 이번 초의 출차 확률로 사용
                will_leave = self.random_source.event_occurred(self.departure_pdf.pdf(duration))

            if not will_leave:
                i += 1
                continue

            self.lot.remove(i)
            spot.timestamp = self.clock
            self.outgoing_queue.enqueue(spot)
            if self.logger is not None:
                self.logger.log_event(time=self.clock, car=spot.car, event="depart",
                                      duration=duration, forced=forced)

    def _process_admission(self) -> None:
        """입차 대기열 맨 앞 차량의 입차를 시도 (만차면 다음 초에 재시도)"""
        if self.incoming_queue.is_empty():
            return

        spot = self.incoming_queue.peek()
        try:
            self.lot.park(spot.car, spot.timestamp)
        except LotFullError:
            if self.logger is not None:
                self.logger.update_stats("park_fail")
            return

        self.incoming_queue.dequeue()
        if self.logger is not None:
            self.logger.log_event(time=self.clock, car=spot.car, event="park",
                                  duration=self.clock - spot.timestamp)

    def _record_snapshot(self) -> None:
        """현재 점유 현황을 로거에 기록"""
        self.logger.record_snapshot(
            time=self.clock,
            occupancy=self.lot.get_occupancy(),
            incoming=self.incoming_queue.size(),
            outgoing=self.outgoing_queue.size()
        )

    def get_incoming_queue_size(self) -> int:
        """입차 대기열 길이 반환"""
        return self.incoming_queue.size()

    def get_outgoing_queue_size(self) -> int:
        """출차 대기열 길이 반환"""
        return self.outgoing_queue.size()
