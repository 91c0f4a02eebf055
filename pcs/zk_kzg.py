"""
하이딩(ZK) KZG 커밋먼트
========================

일반 KZG 커밋먼트 C = f(α)·G1 은 결정론적이라 같은 f에 대해 항상 같은
점이 나온다. 블라인딩 다항식 r(x)를 섞어 하이딩을 얻는다.

    C = f(α)·G1 + r(α)·h,   h = β·G1

**블라인딩**:
  r(x)는 커밋할 때마다 새로 뽑아야 한다. 같은 f에 같은 r을 재사용하면
  두 커밋먼트가 같아져 하이딩이 깨진다.

**열기 증명**:
  q_f = (f - f(u)) / (x - u), q_r = (r - r(u)) / (x - u)
  π = q_f(α)·G1 + q_r(α)·h

**검증**:
  e(π, α·G2 - u·G2) == e(C - v·G1 - v_r·h, G2)
  = e(G1,G2)^{q_f(α)(α-u)} · e(h,G2)^{q_r(α)(α-u)}
  = e(G1,G2)^{f(α)-v} · e(h,G2)^{r(α)-v_r}
"""

import logging

from pcs.errors import LengthMismatchError
from pcs.field import G1, G2, to_fr, ec_mul, ec_add, ec_sub, ec_pairing
from pcs.kzg import commit, divide_by_linear
from pcs.polynomial import as_coeffs
from pcs.rand import SystemRandomSource, random_coeffs
from pcs.srs import hiding_setup

logger = logging.getLogger(__name__)


def commit_hiding(pp, pp_h, coefficients, blinding):
    """하이딩 커밋먼트 C = f(α)·G1 + r(α)·h.

    Raises:
        LengthMismatchError: len(f) != len(pp) 또는 len(r) != len(pp_h)
    """
    blinding = as_coeffs(blinding)
    if len(blinding) != len(pp_h):
        raise LengthMismatchError(
            f"블라인딩 계수 개수 {len(blinding)}가 pp_h 길이 {len(pp_h)}와 다릅니다"
        )

    result = commit(pp, coefficients)
    for point, coeff in zip(pp_h, blinding):
        result = ec_add(result, ec_mul(point, coeff))
    return result


def create_hiding_witness(pp, pp_h, coefficients, blinding, u):
    """f와 r을 각각 (x - u)로 나눈 몫을 하이딩 커밋한다."""
    coefficients = as_coeffs(coefficients)
    blinding = as_coeffs(blinding)
    if len(coefficients) > len(pp) or len(blinding) > len(pp_h):
        raise LengthMismatchError("다항식이 공개 파라미터보다 깁니다")

    q_f = divide_by_linear(coefficients, u)
    q_r = divide_by_linear(blinding, u)
    return commit_hiding(pp[:len(q_f)], pp_h[:len(q_r)], q_f, q_r)


def verify_hiding_opening(com_f, com_q, u, v, v_r, h, alpha_g2):
    """하이딩 열기 증명을 검증한다.

    Args:
        com_f: 하이딩 커밋먼트
        com_q: 하이딩 증명
        u: 평가 점
        v: 주장하는 f(u)
        v_r: 주장하는 r(u)
        h: 블라인딩 기저 β·G1
        alpha_g2: 검증 키

    Returns:
        bool
    """
    u = to_fr(u)

    pairing2 = ec_pairing(ec_sub(alpha_g2, ec_mul(G2, u)), com_q)

    lhs = ec_sub(ec_sub(com_f, ec_mul(G1, to_fr(v))), ec_mul(h, to_fr(v_r)))
    pairing1 = ec_pairing(G2, lhs)

    ok = pairing1 == pairing2
    logger.debug("hiding opening at u=%d: %s", int(u), "valid" if ok else "invalid")
    return ok


class ZkKzg:
    """하이딩 KZG 스킴 객체.

    예시:
        >>> zk = ZkKzg()
        >>> pp, pp_h, alpha_g2, h = zk.setup(4)
        >>> r = zk.blinding(len(pp_h))            # 커밋마다 새로 뽑는다
        >>> C = zk.commit(pp, pp_h, f, r)
    """

    def __init__(self, random_source=None):
        self.random_source = random_source or SystemRandomSource()

    def setup(self, degree):
        return hiding_setup(degree, self.random_source)

    def blinding(self, length):
        """새 블라인딩 다항식 r(x)의 계수."""
        return random_coeffs(length, self.random_source)

    def commit(self, pp, pp_h, coefficients, blinding):
        return commit_hiding(pp, pp_h, coefficients, blinding)

    def prove(self, pp, pp_h, coefficients, blinding, u):
        return create_hiding_witness(pp, pp_h, coefficients, blinding, u)

    def verify(self, com_f, com_q, u, v, v_r, h, alpha_g2):
        return verify_hiding_opening(com_f, com_q, u, v, v_r, h, alpha_g2)
