"""
KZG 데모: f(x) = 5 + 4x + 3x² + 2x³ + x⁴, u = 5
================================================

실행:
    python -m pcs.example

흐름:
    1. 신뢰 설정 (trusted setup)
    2. 커밋
    3. 열기 증명 생성 및 검증 (v = f(5) = 975)
    4. 거짓 평가값으로 검증 (실패해야 함)
    5. toxic waste 유출 시 위조 증명 (v_fake = 999, 통과해 버림)

환경 변수 PCS_SEED, PCS_LOG_LEVEL로 시드와 로그 레벨을 정할 수 있다.
"""

from pcs.cheating import CheatingKzg
from pcs.config import PCSConfig
from pcs.kzg import Kzg
from pcs.logger import setup_logger
from pcs.polynomial import Polynomial


def main():
    config = PCSConfig.from_env()
    setup_logger("pcs", config.log_level)

    f = Polynomial([5, 4, 3, 2, 1])
    u = 5

    print("=" * 60)
    print("  KZG Polynomial Commitment Demo")
    print(f"  다항식: {f}, u = {u}")
    print("=" * 60)

    # ── 1. 신뢰 설정 ──
    print("\n[1] 신뢰 설정 (trusted setup)...")
    kzg = Kzg(config.random_source())
    pp, alpha_g2 = kzg.setup(f.degree)
    print(f"    pp 길이: {len(pp)}")

    # ── 2. 커밋 ──
    print("\n[2] 커밋...")
    com_f = kzg.commit(pp, f)
    print(f"    C = ({int(com_f[0])}, ...)")

    # ── 3. 열기 증명 ──
    print("\n[3] 열기 증명...")
    v = f.evaluate(u)
    com_q = kzg.prove(pp, f, u)
    result = kzg.verify(com_f, com_q, u, v, alpha_g2)
    print(f"    v = f({u}) = {int(v)}")
    print(f"    검증 결과: {'성공 ✓' if result else '실패 ✗'}")

    # ── 4. 거짓 평가값 ──
    print("\n[4] 거짓 평가값으로 검증 (v + 1)...")
    wrong_result = kzg.verify(com_f, com_q, u, v + 1, alpha_g2)
    print(f"    검증 결과: {'성공 ✓' if wrong_result else '실패 ✗ (예상대로 실패)'}")

    # ── 5. toxic waste 유출 ──
    print("\n[5] α 유출 시 위조 증명 (v_fake = 999)...")
    cheater = CheatingKzg(config.random_source())
    bad_pp, bad_alpha_g2, alpha = cheater.setup(f.degree)
    bad_com_f = cheater.commit(bad_pp, f)
    fake_proof = cheater.prove(bad_pp, f, u, alpha=alpha, fake_value=999)
    forged = cheater.verify(bad_com_f, fake_proof, u, 999, bad_alpha_g2)
    print(f"    검증 결과: {'성공 (건전성 붕괴!)' if forged else '실패'}")

    print("\n" + "=" * 60)
    if result and not wrong_result and forged:
        print("  데모 완료: 모든 시나리오가 예상대로 동작")
    else:
        print("  데모 완료: 예상과 다른 결과")
    print("=" * 60)

    return result


if __name__ == "__main__":
    main()
