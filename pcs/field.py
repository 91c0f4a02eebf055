"""
KZG 기반 모듈: 유한체(Finite Field) 및 타원곡선 연산
=====================================================

이 모듈은 KZG 다항식 커밋먼트 스킴 전체에서 사용되는 대수적 도구를 감싼다.
실제 연산은 py_ecc가 수행하고, 여기서는 스킴이 기대하는 계약(contract)을
맞춰 준다.

**유한체 FR**:
  bn128 타원곡선의 스칼라 필드. 다항식 계수, 평가 점 u, 평가값 v,
  그리고 toxic waste α가 모두 이 체의 원소이다.

**타원곡선 연산**:
  G1, G2 그룹의 덧셈/뺄셈/스칼라곱과 페어링 e: G1 × G2 → GT.

**주의 (역원)**:
  py_ecc의 FQ 나눗셈은 0의 역원을 조용히 0으로 취급한다.
  스킴에서 0으로 나누는 것은 치명적 오류이므로 fr_inv / fr_div는
  FieldInversionError를 발생시킨다.

사용 예시:
    >>> from pcs.field import FR, G1, ec_mul
    >>> a = FR(3) * FR(7)    # FR(21)
    >>> P = ec_mul(G1, a)    # 21·G1
"""

from py_ecc.fields import bn128_FQ as FQ
from py_ecc import bn128

from pcs.errors import FieldInversionError


# ─────────────────────────────────────────────────────────────────────
# 유한체(Finite Field) FR
# ─────────────────────────────────────────────────────────────────────

class FR(FQ):
    """bn128 스칼라 필드 위의 유한체 원소.

    예시:
        >>> FR(5) - FR(7) == FR(CURVE_ORDER - 2)  # True
    """
    field_modulus = bn128.curve_order


# 곡선 위수 (필드 크기)
CURVE_ORDER = bn128.curve_order

# 고정 폭 인코딩 바이트 수 (254비트 → 32바이트)
FR_BYTES = 32


def to_fr(value):
    """정수 또는 FR 원소를 FR로 정규화한다."""
    if isinstance(value, FR):
        return value
    return FR(int(value))


def fr_inv(a):
    """곱셈 역원 a⁻¹.

    Raises:
        FieldInversionError: a == 0 일 때
    """
    a = to_fr(a)
    if a == FR(0):
        raise FieldInversionError("FR의 0은 역원이 없습니다")
    return FR(pow(int(a), CURVE_ORDER - 2, CURVE_ORDER))


def fr_div(a, b):
    """체 나눗셈 a / b. b == 0이면 FieldInversionError."""
    return to_fr(a) * fr_inv(b)


def fr_to_bytes(a):
    """FR 원소를 32바이트 big-endian으로 인코딩한다."""
    return int(to_fr(a)).to_bytes(FR_BYTES, "big")


def fr_from_bytes(data):
    """32바이트 big-endian 인코딩을 FR 원소로 디코딩한다.

    Raises:
        ValueError: 길이가 32가 아니거나 값이 CURVE_ORDER 이상일 때
    """
    if len(data) != FR_BYTES:
        raise ValueError(
            f"FR 인코딩은 {FR_BYTES}바이트여야 합니다: {len(data)}바이트"
        )
    value = int.from_bytes(data, "big")
    if value >= CURVE_ORDER:
        raise ValueError("인코딩된 값이 스칼라 필드 범위를 벗어났습니다")
    return FR(value)


# ─────────────────────────────────────────────────────────────────────
# 타원곡선 상수 및 연산
# ─────────────────────────────────────────────────────────────────────

# G1 그룹 생성자 (generator)
G1 = bn128.G1

# G2 그룹 생성자 (generator)
G2 = bn128.G2

# 영점 (point at infinity) - 항등원
Z1 = None  # bn128에서 항등원은 None으로 표현


def ec_mul(point, scalar):
    """타원곡선 스칼라 곱셈: scalar · point.

    Args:
        point: G1 또는 G2 위의 점
        scalar: 정수 또는 FR 원소

    Returns:
        scalar · point (같은 그룹의 점). scalar가 0이면 항등원(None).
    """
    if isinstance(scalar, FR):
        scalar = int(scalar)
    return bn128.multiply(point, scalar % CURVE_ORDER)


def ec_add(p1, p2):
    """타원곡선 점 덧셈: p1 + p2."""
    return bn128.add(p1, p2)


def ec_neg(point):
    """타원곡선 점의 역원 (negation): -point."""
    return bn128.neg(point)


def ec_sub(p1, p2):
    """타원곡선 점 뺄셈: p1 - p2."""
    return bn128.add(p1, bn128.neg(p2))


def ec_eq(p1, p2):
    """두 점이 같은지 비교한다. 항등원(None)끼리도 같다."""
    return p1 == p2


def ec_pairing(g2_point, g1_point):
    """쌍선형 페어링 e(G1, G2) → GT.

    주의:
        py_ecc.bn128.pairing의 인자 순서는 (G2, G1)이다.
        어느 한쪽이 항등원이면 결과는 GT의 항등원 1이다.
    """
    if g2_point is None or g1_point is None:
        return bn128.FQ12.one()
    return bn128.pairing(g2_point, g1_point)
