"""
출차 확률 계산에 쓰이는 확률 분포를 제공하는 모듈
"""
from fractions import Fraction
from numbers import Rational
from typing import Union

Number = Union[int, float, Fraction]

_ZERO = Fraction(0)


def _exact(value: Number) -> Number:
    """정수와 분수는 Fraction으로, 실수는 그대로 유지"""
    if isinstance(value, Rational):
        return Fraction(value)
    return value


class TriangularDistribution:
    """
    하한 a, 최빈값 c, 상한 b를 갖는 삼각 분포

    정수나 분수로 생성하면 pdf와 cdf가 정확한 Fraction 값을 반환합니다.
    """

    def __init__(self, a: Number, c: Number, b: Number):
        """
        Args:
            a: 하한
            c: 최빈값 (a <= c <= b)
            b: 상한 (a < b)
        """
        if not a <= c <= b:
            raise ValueError(f"a <= c <= b 조건을 만족해야 합니다: a={a}, c={c}, b={b}")
        if a == b:
            raise ValueError(f"하한과 상한이 같을 수 없습니다: {a}")

        self.a = _exact(a)
        self.c = _exact(c)
        self.b = _exact(b)

        # 정수 경계이면 정수 위치의 밀도를 정수 연산으로 계산해 캐시
        self._integral = all(isinstance(v, int) for v in (a, c, b))
        self._pdf_cache = {}
        self._lower, self._upper = a, b

    def _integer_pdf(self, x: int) -> Fraction:
        """정수 경계, 정수 위치에서의 밀도 ([a, b] 안쪽만)"""
        a, b, c = int(self.a), int(self.b), int(self.c)
        if x < c:
            return Fraction(2 * (x - a), (b - a) * (c - a))
        if x == c:
            return Fraction(2, b - a)
        return Fraction(2 * (b - x), (b - a) * (b - c))

    def pdf(self, x: Number) -> Number:
        """
        x에서의 확률 밀도를 계산합니다.

        Args:
            x: 밀도를 계산할 위치

        Returns:
            확률 밀도 ([a, b] 밖에서는 0)
        """
        if self._integral and isinstance(x, int):
            if x < self._lower or x > self._upper:
                return _ZERO
            value = self._pdf_cache.get(x)
            if value is None:
                value = self._integer_pdf(x)
                self._pdf_cache[x] = value
            return value

        x = _exact(x)
        a, b, c = self.a, self.b, self.c

        if x < a or x > b:
            return Fraction(0) if isinstance(x, Fraction) else 0.0
        if x < c:
            return 2 * (x - a) / ((b - a) * (c - a))
        if x == c:
            return 2 / (b - a)
        return 2 * (b - x) / ((b - a) * (b - c))

    def cdf(self, x: Number) -> Number:
        """x 이하일 누적 확률"""
        x = _exact(x)
        a, b, c = self.a, self.b, self.c

        if x <= a:
            return Fraction(0) if isinstance(x, Fraction) else 0.0
        if x >= b:
            return Fraction(1) if isinstance(x, Fraction) else 1.0
        if x <= c:
            return (x - a) ** 2 / ((b - a) * (c - a))
        return 1 - (b - x) ** 2 / ((b - a) * (b - c))

    def mean(self) -> Number:
        """분포의 평균"""
        return (self.a + self.b + self.c) / 3

    def __str__(self) -> str:
        return f"TriangularDistribution(a={self.a}, c={self.c}, b={self.b})"
