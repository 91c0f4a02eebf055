"""
오염된 신뢰 설정에서의 증명 위조
=================================

KZG의 건전성(soundness)은 α가 폐기되었다는 가정에만 의존한다.
α를 아는 프로버는 몫 다항식을 실제로 나누지 않고, 검증 등식을
대수적으로 맞추는 값을 직접 계산할 수 있다.

    q_fake = (f(α) - v_fake) / (α - u)
    π_fake = q_fake · G1

    e(π_fake, (α-u)·G2) = e(G1,G2)^{f(α) - v_fake} = e(C - v_fake·G1, G2)

검증 로직은 정직한 Kzg에서 그대로 물려받는다. 검증자만으로는
오염된 설정을 탐지할 수 없다는 것을 보여 주기 위한 시연 코드이다.
정직한 Kzg를 대신해 몰래 쓰이는 일이 없도록 항상 명시적으로 선택한다.
"""

import logging

from pcs.field import G1, to_fr, fr_div, ec_mul
from pcs.kzg import Kzg
from pcs.polynomial import eval_poly_at
from pcs.srs import compromised_setup

logger = logging.getLogger(__name__)


def forge_witness(coefficients, u, alpha, fake_value):
    """α를 이용해 임의의 평가값 fake_value에 대한 증명을 위조한다.

    Args:
        coefficients: 커밋된 f의 계수
        u: 평가 점
        alpha: 유출된 toxic waste
        fake_value: 검증자가 믿게 만들 거짓 평가값

    Returns:
        G1 점: 위조된 증명

    Raises:
        FieldInversionError: α == u 일 때
    """
    alpha = to_fr(alpha)
    f_alpha = eval_poly_at(coefficients, alpha)

    q_fake = fr_div(f_alpha - to_fr(fake_value), alpha - to_fr(u))
    return ec_mul(G1, q_fake)


class CheatingKzg(Kzg):
    """α를 보유한 프로버. setup이 α를 돌려주고 prove가 증명을 위조한다."""

    def setup(self, degree):
        return compromised_setup(degree, self.random_source)

    def prove(self, pp, coefficients, u, *, alpha, fake_value):
        logger.warning("forging opening proof at u=%d", int(to_fr(u)))
        return forge_witness(coefficients, u, alpha, fake_value)
