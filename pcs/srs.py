"""
KZG 신뢰 설정 (Trusted Setup)
==============================

비밀 스칼라 α ("toxic waste")로부터 공개 파라미터를 만든다.

    pp       = [G1, α·G1, α²·G1, ..., α^d·G1]   (프로버용, S_p)
    alpha_g2 = α·G2                              (검증자용, S_v)

**보안**:
  α를 아는 사람은 임의의 거짓 평가값에 대한 증명을 만들 수 있다
  (pcs.cheating 참고). 정직한 경로에서 α는 설정 함수의 지역 변수로만
  존재하고, 반환되거나 저장되거나 로그에 남지 않는다.

  단, Python에서 지역 바인딩을 지우는 것은 메모리에서 값이 실제로
  지워진다는 보장이 아니다. int는 불변 객체라 0으로 덮어쓸 수도 없다.

**하이딩 변형**:
  독립적인 β를 추가로 뽑아 h = β·G1, pp_h = [αⁱ·h]를 만든다.
  같은 α를 재사용하므로 페어링 한 번으로 두 항을 동시에 검증할 수 있다.

사용 예시:
    >>> setup = trusted_setup(4)
    >>> len(setup.pp)  # 5 (0차부터 4차까지)
"""

import logging
from typing import NamedTuple

from pcs.errors import InvalidDegreeError
from pcs.field import FR, G1, G2, ec_mul
from pcs.rand import SystemRandomSource

logger = logging.getLogger(__name__)


class Setup(NamedTuple):
    """정직한 설정 결과: (pp, alpha_g2)."""
    pp: tuple
    alpha_g2: tuple


class HidingSetup(NamedTuple):
    """하이딩 설정 결과: (pp, pp_h, alpha_g2, h)."""
    pp: tuple
    pp_h: tuple
    alpha_g2: tuple
    h: tuple


class CompromisedSetup(NamedTuple):
    """α가 유출된 설정 결과: (pp, alpha_g2, alpha). 공격 시연 전용."""
    pp: tuple
    alpha_g2: tuple
    alpha: FR


def check_degree(degree):
    if isinstance(degree, bool) or not isinstance(degree, int) or degree < 1:
        raise InvalidDegreeError(f"차수는 1 이상의 정수여야 합니다: {degree!r}")


def power_ladder(base, alpha, degree):
    """[base, α·base, α²·base, ..., α^d·base]를 튜플로 만든다."""
    ladder = []
    alpha_power = FR(1)  # α^0 = 1
    for _ in range(degree + 1):
        ladder.append(ec_mul(base, alpha_power))
        alpha_power = alpha_power * alpha
    return tuple(ladder)


def _build(degree, alpha):
    pp = power_ladder(G1, alpha, degree)
    # α·G2: ECDLP 가정하에 G2와 alpha_g2로부터 α를 복원할 수 없다
    alpha_g2 = ec_mul(G2, alpha)
    return pp, alpha_g2


def trusted_setup(degree, random_source=None):
    """최대 차수 degree용 공개 파라미터를 생성한다.

    Args:
        degree: 지원할 최대 다항식 차수 d (d ≥ 1)
        random_source: random_scalar()를 제공하는 객체.
                       None이면 SystemRandomSource.

    Returns:
        Setup: (pp, alpha_g2), len(pp) == d + 1

    Raises:
        InvalidDegreeError: d < 1
    """
    check_degree(degree)
    if random_source is None:
        random_source = SystemRandomSource()

    alpha = random_source.random_scalar()
    pp, alpha_g2 = _build(degree, alpha)
    del alpha

    logger.debug("trusted setup done: degree=%d", degree)
    return Setup(pp, alpha_g2)


def hiding_setup(degree, random_source=None):
    """하이딩(ZK) 커밋먼트용 공개 파라미터를 생성한다.

    Returns:
        HidingSetup: (pp, pp_h, alpha_g2, h)
            pp_h[i] = β·αⁱ·G1, h = β·G1
    """
    check_degree(degree)
    if random_source is None:
        random_source = SystemRandomSource()

    alpha = random_source.random_scalar()
    beta = random_source.random_scalar()

    pp, alpha_g2 = _build(degree, alpha)
    h = ec_mul(G1, beta)
    pp_h = power_ladder(h, alpha, degree)
    del alpha, beta

    logger.debug("hiding setup done: degree=%d", degree)
    return HidingSetup(pp, pp_h, alpha_g2, h)


def compromised_setup(degree, random_source=None):
    """α를 폐기하지 않고 함께 반환하는 설정 (오염된 세레모니 모델).

    정직한 경로에서는 절대 사용하지 않는다. CheatingKzg 전용.

    Returns:
        CompromisedSetup: (pp, alpha_g2, alpha)
    """
    check_degree(degree)
    if random_source is None:
        random_source = SystemRandomSource()

    alpha = random_source.random_scalar()
    pp, alpha_g2 = _build(degree, alpha)

    logger.warning("compromised setup: toxic waste retained (degree=%d)", degree)
    return CompromisedSetup(pp, alpha_g2, alpha)
