"""
난수 소스 (Random Source)
=========================

신뢰 설정의 toxic waste α, β와 하이딩 커밋먼트의 블라인딩 계수는
모두 여기서 뽑는다. 소스를 주입할 수 있게 분리해 두면 운영 환경에서는
`secrets` 기반 CSPRNG를, 테스트에서는 시드 기반 결정론적 소스를 쓸 수 있다.

  - SystemRandomSource: secrets.randbelow 사용 (기본값)
  - SeededRandomSource: sha256(seed, counter) 사용 (교육/테스트용)

시드 소스는 재현성을 위한 것이며, 같은 시드를 서로 다른 설정에
재사용하면 같은 α가 나온다.
"""

import hashlib
import secrets

from pcs.field import FR, CURVE_ORDER


class SystemRandomSource:
    """운영체제 CSPRNG 기반 난수 소스."""

    def random_scalar(self):
        """0이 아닌 균등 FR 원소를 반환한다."""
        return FR(secrets.randbelow(CURVE_ORDER - 1) + 1)


class SeededRandomSource:
    """시드에서 결정론적으로 FR 원소를 뽑는 난수 소스.

    i번째 원소 = sha256(f"{seed}:{i}") mod r (0이면 다음 카운터로 넘어감)

    예시:
        >>> src = SeededRandomSource(42)
        >>> src.random_scalar() == SeededRandomSource(42).random_scalar()  # True
    """

    def __init__(self, seed):
        self.seed = seed
        self._counter = 0

    def random_scalar(self):
        while True:
            h = hashlib.sha256(f"{self.seed}:{self._counter}".encode()).digest()
            self._counter += 1
            value = int.from_bytes(h, "big") % CURVE_ORDER
            if value != 0:
                return FR(value)


def random_scalar(random_source=None):
    """주어진 소스(없으면 시스템 소스)에서 FR 원소 하나를 뽑는다."""
    if random_source is None:
        random_source = SystemRandomSource()
    return random_source.random_scalar()


def random_coeffs(length, random_source=None):
    """길이 length의 무작위 계수 리스트 (블라인딩 다항식 r(x)용)."""
    if random_source is None:
        random_source = SystemRandomSource()
    return [random_source.random_scalar() for _ in range(length)]
