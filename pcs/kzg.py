"""
KZG 다항식 커밋먼트 스킴
=========================

Kate-Zaverucha-Goldberg (KZG) 커밋먼트.

**커밋먼트**:
  C = Σᵢ cᵢ · [αⁱ]₁ = f(α)·G1
  α를 모르는 채로 pp의 선형결합만으로 f(α)·G1을 계산한다.
  이산로그 가정하에 바인딩(binding)이지만, 같은 f는 항상 같은 C가
  되므로 하이딩(hiding)은 아니다. 하이딩은 pcs.zk_kzg 참고.

**열기 증명 (Opening Proof)**:
  f(u) = v
  ⟺ u는 f(x) - v의 근
  ⟺ (x - u) | f(x) - v
  ⟺ q(x)·(x - u) = f(x) - v 인 다항식 q가 존재
  증명 π = q(α)·G1. 나눗셈은 v가 참 평가값일 때만 나머지 없이 떨어진다.

**검증**:
  e(π, α·G2 - u·G2) == e(C - v·G1, G2)
  쌍선형성에 의해 양변은 e(G1,G2)^{q(α)(α-u)}, e(G1,G2)^{f(α)-v}이다.

사용 예시:
    >>> kzg = Kzg()
    >>> pp, alpha_g2 = kzg.setup(4)
    >>> C = kzg.commit(pp, [5, 4, 3, 2, 1])
    >>> proof = kzg.prove(pp, [5, 4, 3, 2, 1], 5)
    >>> kzg.verify(C, proof, 5, 975, alpha_g2)  # True
"""

import logging

from pcs.errors import LengthMismatchError
from pcs.field import FR, G1, G2, Z1, to_fr, ec_mul, ec_add, ec_sub, ec_pairing
from pcs.polynomial import as_coeffs
from pcs.rand import SystemRandomSource
from pcs.srs import trusted_setup

logger = logging.getLogger(__name__)


def commit(pp, coefficients):
    """다항식을 KZG 커밋한다.

    C = Σᵢ cᵢ · pp[i] = f(α) · G1

    Args:
        pp: [G1, α·G1, ..., α^d·G1]
        coefficients: 계수 시퀀스 또는 Polynomial. 길이가 pp와 같아야 한다.

    Returns:
        G1 점: 커밋먼트 C (영 다항식이면 항등원 None)

    Raises:
        LengthMismatchError: len(coefficients) != len(pp)
    """
    coefficients = as_coeffs(coefficients)
    if len(coefficients) != len(pp):
        raise LengthMismatchError(
            f"계수 개수 {len(coefficients)}가 pp 길이 {len(pp)}와 다릅니다"
        )

    result = Z1  # 무한원점 (항등원)
    for point, coeff in zip(pp, coefficients):
        result = ec_add(result, ec_mul(point, coeff))
    return result


def divide_by_linear(coefficients, u):
    """f(x)를 (x - u)로 조립제법(synthetic division)한다.

    최고차항부터 내려가며:
        carry = c[i] + u · carry
        q[i-1] = carry

    Args:
        coefficients: f의 계수 [c₀, ..., c_n]
        u: 평가 점

    Returns:
        list[FR]: 몫 q의 계수 (길이 n). 마지막 carry(= f(u))는 버린다.
    """
    coefficients = as_coeffs(coefficients)
    u = to_fr(u)

    quotient = [FR(0)] * max(len(coefficients) - 1, 0)
    carry = FR(0)
    for i in range(len(coefficients) - 1, 0, -1):
        carry = coefficients[i] + u * carry
        quotient[i - 1] = carry
    return quotient


def create_witness(pp, coefficients, u):
    """열기 증명 π = commit(q) 를 만든다.

    q(x) = (f(x) - f(u)) / (x - u). 상수항은 몫에 영향을 주지 않으므로
    f(u)를 미리 빼지 않고 f를 그대로 나눈다.

    Args:
        pp: 공개 파라미터
        coefficients: f의 계수 (len ≤ len(pp))
        u: 평가 점

    Returns:
        G1 점: 증명 π. 상수 다항식이면 몫이 비어 항등원(None).

    Raises:
        LengthMismatchError: f가 pp보다 길 때
    """
    coefficients = as_coeffs(coefficients)
    if len(coefficients) > len(pp):
        raise LengthMismatchError(
            f"다항식 길이 {len(coefficients)}가 pp 길이 {len(pp)}를 초과합니다"
        )

    quotient = divide_by_linear(coefficients, u)
    return commit(pp[:len(quotient)], quotient)


def verify_opening(com_f, com_q, u, v, alpha_g2):
    """KZG 열기 증명을 검증한다.

    e(π, α·G2 - u·G2) == e(C - v·G1, G2)

    Args:
        com_f: 커밋먼트 C
        com_q: 증명 π
        u: 평가 점
        v: 주장하는 평가값
        alpha_g2: 검증 키 α·G2

    Returns:
        bool: 검증 성공 여부. 잘못된 주장은 예외가 아니라 False.
    """
    u = to_fr(u)
    v = to_fr(v)

    # e(q(α)·G1, (α-u)·G2) = e(G1, G2)^{q(α)(α-u)}
    pairing2 = ec_pairing(ec_sub(alpha_g2, ec_mul(G2, u)), com_q)

    # e((f(α)-v)·G1, G2) = e(G1, G2)^{f(α)-v}
    pairing1 = ec_pairing(G2, ec_sub(com_f, ec_mul(G1, v)))

    ok = pairing1 == pairing2
    logger.debug("opening at u=%d: %s", int(u), "valid" if ok else "invalid")
    return ok


class Kzg:
    """setup → commit → prove → verify 를 한 객체로 묶은 정직한 KZG.

    Args:
        random_source: 신뢰 설정에 쓸 난수 소스 (기본: SystemRandomSource)
    """

    def __init__(self, random_source=None):
        self.random_source = random_source or SystemRandomSource()

    def setup(self, degree):
        return trusted_setup(degree, self.random_source)

    def commit(self, pp, coefficients):
        return commit(pp, coefficients)

    def prove(self, pp, coefficients, u):
        return create_witness(pp, coefficients, u)

    def verify(self, com_f, com_q, u, v, alpha_g2):
        return verify_opening(com_f, com_q, u, v, alpha_g2)
