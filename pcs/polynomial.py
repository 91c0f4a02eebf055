"""
KZG 기반 모듈: 다항식(Polynomial) 및 보조 연산
================================================

**Polynomial 클래스**:
  계수 표현 다항식 p(x) = c₀ + c₁·x + c₂·x² + ...
  생성 후 변경할 수 없으며(immutable), 최고차 0 계수를 잘라내지 않는다.
  커밋할 때 계수 개수가 공개 파라미터(pp) 길이와 정확히 같아야 하므로
  [5, 4, 0]과 [5, 4]는 서로 다른 다항식 표현으로 취급한다.

**보조 연산**:
  - eval_poly_at: Horner 방식 평가
  - add_poly / mul_poly: 계수 리스트 덧셈/곱셈
  - lagrange_interpolation: d+1개의 (x, y) 쌍으로 d차 다항식 복원

사용 예시:
    >>> p = Polynomial([5, 4, 3, 2, 1])   # 5 + 4x + 3x² + 2x³ + x⁴
    >>> p.evaluate(5)                      # FR(975)
"""

from pcs.field import FR, to_fr, fr_inv


def as_coeffs(values):
    """Polynomial 또는 정수/FR 시퀀스를 FR 계수 리스트로 변환한다."""
    if isinstance(values, Polynomial):
        return list(values.coeffs)
    return [to_fr(c) for c in values]


# ─────────────────────────────────────────────────────────────────────
# Polynomial 클래스
# ─────────────────────────────────────────────────────────────────────

class Polynomial:
    """유한체 FR 위의 다항식.

    계수 튜플로 표현: coeffs = (c₀, c₁, c₂, ...) → c₀ + c₁x + c₂x² + ...

    KZG 스킴에서의 역할:
    - f(x): 프로버가 커밋하는 비밀 다항식
    - r(x): 하이딩 커밋먼트용 블라인딩 다항식
    - q(x) = (f(x) - v) / (x - u): 열기 증명의 몫 다항식

    예시:
        >>> p = Polynomial([1, 2])    # 1 + 2x
        >>> q = Polynomial([3, 4])    # 3 + 4x
        >>> p + q                     # Poly(4 + 6*x)
        >>> p * q                     # Poly(3 + 10*x + 8*x^2)
    """

    __slots__ = ("_coeffs",)

    def __init__(self, coeffs=()):
        object.__setattr__(self, "_coeffs", tuple(to_fr(c) for c in coeffs))

    def __setattr__(self, name, value):
        raise AttributeError("Polynomial은 변경할 수 없습니다")

    @property
    def coeffs(self):
        return self._coeffs

    @property
    def degree(self):
        """차수 = 계수 개수 - 1. 빈 다항식은 -1."""
        return len(self._coeffs) - 1

    def evaluate(self, point):
        """다항식을 주어진 점에서 평가한다 (Horner's method)."""
        return eval_poly_at(self._coeffs, point)

    def __call__(self, point):
        return self.evaluate(point)

    def trimmed(self):
        """최고차 0 계수를 제거한 다항식 (영 다항식은 [0])."""
        coeffs = list(self._coeffs)
        while len(coeffs) > 1 and coeffs[-1] == FR(0):
            coeffs.pop()
        return Polynomial(coeffs)

    def __add__(self, other):
        """다항식 덧셈: p(x) + q(x)."""
        if isinstance(other, (int, FR)):
            other = Polynomial([other])
        return Polynomial(add_poly(self._coeffs, other.coeffs))

    def __radd__(self, other):
        return self.__add__(other)

    def __neg__(self):
        return Polynomial([FR(0) - c for c in self._coeffs])

    def __sub__(self, other):
        if isinstance(other, (int, FR)):
            other = Polynomial([other])
        return self + (-other)

    def __mul__(self, other):
        """다항식 곱셈 또는 스칼라곱."""
        if isinstance(other, (int, FR)):
            other = to_fr(other)
            return Polynomial([c * other for c in self._coeffs])
        return Polynomial(mul_poly(self._coeffs, other.coeffs))

    def __rmul__(self, other):
        return self.__mul__(other)

    def __eq__(self, other):
        if isinstance(other, Polynomial):
            return self._coeffs == other.coeffs
        if isinstance(other, (list, tuple)):
            return list(self._coeffs) == as_coeffs(other)
        return NotImplemented

    def __hash__(self):
        return hash(tuple(int(c) for c in self._coeffs))

    def __len__(self):
        return len(self._coeffs)

    def __iter__(self):
        return iter(self._coeffs)

    def __getitem__(self, i):
        return self._coeffs[i]

    def __repr__(self):
        terms = []
        for i, c in enumerate(self._coeffs):
            if c == FR(0):
                continue
            if i == 0:
                terms.append(str(int(c)))
            elif i == 1:
                terms.append(f"{int(c)}*x")
            else:
                terms.append(f"{int(c)}*x^{i}")
        return "Poly(" + " + ".join(terms) + ")" if terms else "Poly(0)"


# ─────────────────────────────────────────────────────────────────────
# 계수 리스트 연산
# ─────────────────────────────────────────────────────────────────────

def eval_poly_at(coeffs, x):
    """p(x)를 Horner 방식으로 평가한다.

    p(x) = c₀ + x(c₁ + x(c₂ + ...))

    Args:
        coeffs: 계수 시퀀스 [c₀, c₁, ...] (정수 또는 FR)
        x: 평가 점

    Returns:
        FR: p(x). 빈 계수 리스트는 0.
    """
    x = to_fr(x)
    result = FR(0)
    for c in reversed(coeffs):
        result = result * x + to_fr(c)
    return result


def add_poly(a, b):
    """계수 리스트 덧셈. 길이가 다르면 짧은 쪽을 0으로 채운다."""
    max_len = max(len(a), len(b))
    result = []
    for i in range(max_len):
        x = to_fr(a[i]) if i < len(a) else FR(0)
        y = to_fr(b[i]) if i < len(b) else FR(0)
        result.append(x + y)
    return result


def mul_poly(a, b):
    """계수 리스트 곱셈 (O(n²) convolution)."""
    if len(a) == 0 or len(b) == 0:
        return []
    result = [FR(0)] * (len(a) + len(b) - 1)
    for i, x in enumerate(a):
        for j, y in enumerate(b):
            result[i + j] = result[i + j] + to_fr(x) * to_fr(y)
    return result


def lagrange_interpolation(points):
    """(x, y) 쌍들을 지나는 최소 차수 다항식을 복원한다.

    L(x) = Σᵢ yᵢ · Πⱼ≠ᵢ (x - xⱼ) / (xᵢ - xⱼ)

    검증자가 d+1개의 서로 다른 점에서 평가값을 모으면 d차 비밀 다항식을
    완전히 복원할 수 있다. (그래서 KZG는 d번 이하로만 열어야 한다.)

    Args:
        points: [(x, y), ...] 정수 또는 FR 쌍

    Returns:
        Polynomial: 최고차 0 계수를 제거한 보간 다항식

    Raises:
        FieldInversionError: x 좌표가 중복될 때
    """
    result = [FR(0)]
    for i, (x_i, y_i) in enumerate(points):
        basis = [FR(1)]
        denominator = FR(1)
        for j, (x_j, _) in enumerate(points):
            if i == j:
                continue
            # basis *= (x - x_j)
            basis = mul_poly(basis, [FR(0) - to_fr(x_j), FR(1)])
            # denominator *= (x_i - x_j)
            denominator = denominator * (to_fr(x_i) - to_fr(x_j))
        term_y = to_fr(y_i) * fr_inv(denominator)
        result = add_poly(result, mul_poly(basis, [term_y]))

    return Polynomial(result).trimmed()
