"""
주차장의 주차면 점유 상태를 관리하는 모듈
"""
from typing import List

from lotsim.models.spot import Spot


class LotFullError(RuntimeError):
    """주차장이 가득 차서 입차할 수 없을 때 발생하는 예외"""


class ParkingLot:
    """정해진 수의 주차면을 가진 주차장 클래스"""

    def __init__(self, capacity: int):
        """
        주차장 초기화

        Args:
            capacity: 전체 주차면 수
        """
        if capacity < 0:
            raise ValueError(f"주차면 수는 음수일 수 없습니다: {capacity}")

        self.capacity = capacity
        self.occupants: List[Spot] = []  # 입차 순서대로 저장된 주차 항목

    def get_capacity(self) -> int:
        """전체 주차면 수 반환"""
        return self.capacity

    def get_occupancy(self) -> int:
        """현재 주차된 차량 수 반환"""
        return len(self.occupants)

    def is_full(self) -> bool:
        """주차장이 가득 찼는지 확인"""
        return len(self.occupants) >= self.capacity

    def get_spot_at(self, i: int) -> Spot:
        """
        i번째 주차 항목을 반환합니다.

        Args:
            i: 0 이상 점유 차량 수 미만의 인덱스

        Returns:
            Spot: 해당 위치의 주차 항목
        """
        if i < 0 or i >= len(self.occupants):
            raise IndexError(f"주차 항목 인덱스 범위 초과: {i} (점유 {len(self.occupants)}대)")
        return self.occupants[i]

    def park(self, car: str, timestamp: int) -> None:
        """
        차량을 주차합니다.

        Args:
            car: 차량 번호
            timestamp: 입차 시각 (초)

        Raises:
            LotFullError: 빈 주차면이 없는 경우
        """
        if self.is_full():
            raise LotFullError(f"주차장이 가득 찼습니다 (수용 {self.capacity}대)")
        self.occupants.append(Spot(car, timestamp))

    def attempt_parking(self, car: str, timestamp: int) -> bool:
        """주차를 시도하고 성공 여부를 반환"""
        try:
            self.park(car, timestamp)
        except LotFullError:
            return False
        return True

    def remove(self, i: int) -> Spot:
        """
        i번째 주차 항목을 제거합니다. 뒤쪽 항목들은 한 칸씩 앞으로 당겨집니다.

        Returns:
            Spot: 제거된 주차 항목
        """
        spot = self.get_spot_at(i)
        del self.occupants[i]
        return spot

    def __str__(self) -> str:
        """문자열 표현"""
        lines = [f"Total capacity: {self.capacity}",
                 f"Total occupancy: {len(self.occupants)}"]
        for spot in self.occupants:
            lines.append(str(spot))
        return "\n".join(lines)
