"""
주차장 또는 대기열에 있는 차량 항목을 나타내는 모델 클래스
"""
from dataclasses import dataclass


@dataclass
class Spot:
    """차량 번호와 타임스탬프를 묶은 항목"""
    car: str        # 차량 번호
    timestamp: int  # 도착, 입차 또는 출차 시각 (초)

    def __post_init__(self):
        """초기화 이후 값 검증"""
        if not self.car:
            raise ValueError("car must be a non-empty identifier")

    def __str__(self) -> str:
        """문자열 표현"""
        return f"{self.car} (t={self.timestamp})"
