"""
시뮬레이션에 필요한 난수 이벤트와 차량 번호를 생성하는 모듈
"""
from fractions import Fraction
from numbers import Rational
from typing import Optional, Union

import numpy as np

from lotsim.config import PLATE_ALPHABET, PLATE_NUM_LENGTH

WORD_BITS = 62              # 한 번에 뽑는 균등 정수의 비트 수
WORD_SPAN = 1 << WORD_BITS
BUFFER_SIZE = 4096          # numpy에서 한 번에 미리 뽑아 두는 정수 개수


class RandomGenerator:
    """
    시드 고정이 가능한 난수 생성기

    같은 시드와 같은 호출 순서에서는 항상 같은 결과를 만듭니다.
    """

    def __init__(self, seed: Optional[int] = None):
        """
        Args:
            seed: 난수 생성을 위한 시드 (None이면 매번 다른 결과)
        """
        self.seed = seed
        self._rng = np.random.default_rng(seed)
        self._buffer = []
        self._pos = 0

    def _next_word(self) -> int:
        """[0, 2^62) 범위의 균등 정수 하나 (numpy에서 묶음으로 생성)"""
        if self._pos >= len(self._buffer):
            self._buffer = self._rng.integers(0, WORD_SPAN, size=BUFFER_SIZE, dtype=np.int64).tolist()
            self._pos = 0
        word = self._buffer[self._pos]
        self._pos += 1
        return word

    def _uniform_below(self, n: int) -> int:
        """[0, n) 범위의 균등 정수 (기각 샘플링으로 편향 없음)"""
        words, span = 1, WORD_SPAN
        while span < n:
            words += 1
            span <<= WORD_BITS
        limit = span - span % n
        while True:
            k = self._next_word()
            for _ in range(words - 1):
                k = (k << WORD_BITS) | self._next_word()
            if k < limit:
                return k % n

    def event_occurred(self, probability: Union[Fraction, float]) -> bool:
        """
        주어진 확률로 이번 초에 이벤트가 발생했는지 샘플링합니다.

        Args:
            probability: 0 이상 1 이하의 확률 (Fraction 또는 float)

        Returns:
            bool: 이벤트 발생 여부
        """
        if isinstance(probability, Rational):
            numerator, denominator = probability.numerator, probability.denominator
            if numerator < 0 or numerator > denominator:
                raise ValueError(f"확률은 0과 1 사이여야 합니다: {probability}")
            if numerator == 0:
                return False
            if numerator == denominator:
                return True
            # 분모 범위의 정수를 뽑아 분자와 비교 (부동소수점 오차 없음)
            return self._uniform_below(denominator) < numerator

        p = float(probability)
        if not 0.0 <= p <= 1.0:
            raise ValueError(f"확률은 0과 1 사이여야 합니다: {probability}")
        return self._next_word() / WORD_SPAN < p

    def generate_random_car(self, length: int = PLATE_NUM_LENGTH) -> str:
        """
        고정 길이의 차량 번호를 생성합니다.

        Args:
            length: 차량 번호 길이

        Returns:
            str: 차량 번호
        """
        if length < 1:
            raise ValueError(f"차량 번호 길이는 1 이상이어야 합니다: {length}")
        chars = self._rng.choice(list(PLATE_ALPHABET), size=length)
        return "".join(str(ch) for ch in chars)
