"""
Tests for the binding KZG scheme: pcs/kzg.py

Covers:
- commit (known polynomial, zero polynomial, length mismatch, linearity, binding)
- divide_by_linear (synthetic division agrees with multiplication)
- create_witness + verify_opening (completeness, soundness, degenerate quotient)
- the f(x) = 5 + 4x + 3x^2 + 2x^3 + x^4, u = 5 scenario
"""

import pytest
from pcs.errors import LengthMismatchError
from pcs.field import FR, G1, Z1, ec_mul, ec_add
from pcs.kzg import Kzg, commit, divide_by_linear, create_witness, verify_opening
from pcs.polynomial import Polynomial, eval_poly_at, mul_poly, add_poly
from pcs.rand import SeededRandomSource, random_coeffs


F_COEFFS = [5, 4, 3, 2, 1]


# ─────────────────────────────────────────────────────────────────────
# Commit
# ─────────────────────────────────────────────────────────────────────

class TestCommit:
    """KZG commit 함수 테스트."""

    def test_commit_constant_slot(self, setup4):
        """commit([c, 0, 0, 0, 0]) == c * G1."""
        C = commit(setup4.pp, [7, 0, 0, 0, 0])
        assert C == ec_mul(G1, FR(7))

    def test_commit_linear(self, setup4):
        """commit(a + bx) == a*pp[0] + b*pp[1]."""
        pp = setup4.pp
        C = commit(pp, [3, 5, 0, 0, 0])
        assert C == ec_add(ec_mul(pp[0], 3), ec_mul(pp[1], 5))

    def test_commit_zero_polynomial(self, setup4):
        assert commit(setup4.pp, [0] * 5) is Z1

    def test_commit_accepts_polynomial(self, setup4):
        assert commit(setup4.pp, Polynomial(F_COEFFS)) == commit(setup4.pp, F_COEFFS)

    def test_commit_too_short(self, setup4):
        """No implicit zero padding."""
        with pytest.raises(LengthMismatchError):
            commit(setup4.pp, [1, 2, 3])

    def test_commit_too_long(self, setup4):
        with pytest.raises(LengthMismatchError):
            commit(setup4.pp, [1] * 6)

    def test_commit_truncated_pp(self, setup4):
        """A prefix of pp commits lower-degree polynomials."""
        C = commit(setup4.pp[:2], [3, 5])
        assert C == commit(setup4.pp, [3, 5, 0, 0, 0])

    def test_linearity(self, setup4):
        """commit(p + q) == commit(p) + commit(q)."""
        p = [1, 2, 3, 4, 5]
        q = [9, 0, 7, 0, 1]
        C_sum = commit(setup4.pp, add_poly(p, q))
        assert C_sum == ec_add(commit(setup4.pp, p), commit(setup4.pp, q))

    def test_scalar_multiplication(self, setup4):
        p = Polynomial([2, 3, 0, 0, 1])
        assert commit(setup4.pp, p * 5) == ec_mul(commit(setup4.pp, p), 5)

    def test_binding_random_pairs(self, setup4):
        """Different coefficient vectors give different commitments."""
        src = SeededRandomSource(2024)
        for _ in range(3):
            f1 = random_coeffs(5, src)
            f2 = list(f1)
            f2[src.random_scalar().n % 5] += FR(1)
            assert commit(setup4.pp, f1) != commit(setup4.pp, f2)

    def test_binding_single_coefficient(self, setup4):
        base = commit(setup4.pp, F_COEFFS)
        for i in range(5):
            other = list(F_COEFFS)
            other[i] += 1
            assert commit(setup4.pp, other) != base


# ─────────────────────────────────────────────────────────────────────
# Synthetic division
# ─────────────────────────────────────────────────────────────────────

class TestDivideByLinear:
    def test_quotient_length(self):
        assert len(divide_by_linear(F_COEFFS, 5)) == 4

    def test_known_quotient(self):
        # x^2 - 1 = (x - 1)(x + 1)
        assert divide_by_linear([-1, 0, 1], 1) == [FR(1), FR(1)]

    def test_reconstructs_f_minus_v(self):
        """q(x)(x - u) + f(u) == f(x)."""
        u = FR(5)
        q = divide_by_linear(F_COEFFS, u)
        v = eval_poly_at(F_COEFFS, u)
        rebuilt = add_poly(mul_poly(q, [FR(0) - u, FR(1)]), [v])
        assert rebuilt == [FR(c) for c in F_COEFFS]

    def test_random_polynomials(self):
        src = SeededRandomSource(77)
        for _ in range(3):
            f = random_coeffs(6, src)
            u = src.random_scalar()
            q = divide_by_linear(f, u)
            rebuilt = add_poly(mul_poly(q, [FR(0) - u, FR(1)]), [eval_poly_at(f, u)])
            assert rebuilt == f

    def test_constant_gives_empty_quotient(self):
        assert divide_by_linear([7], 3) == []

    def test_empty_input(self):
        assert divide_by_linear([], 3) == []

    def test_at_zero_shifts_coefficients(self):
        assert divide_by_linear([9, 1, 2, 3], 0) == [FR(1), FR(2), FR(3)]


# ─────────────────────────────────────────────────────────────────────
# Opening proofs
# ─────────────────────────────────────────────────────────────────────

class TestOpening:
    """create_witness + verify_opening 테스트."""

    def test_concrete_scenario(self, setup4):
        """f(5) = 975 verifies."""
        pp, alpha_g2 = setup4
        C = commit(pp, F_COEFFS)
        proof = create_witness(pp, F_COEFFS, 5)
        v = eval_poly_at(F_COEFFS, 5)
        assert v == FR(975)
        assert verify_opening(C, proof, 5, 975, alpha_g2) is True

    @pytest.mark.parametrize("wrong", [974, 976, 999, 0])
    def test_concrete_scenario_wrong_value(self, setup4, wrong):
        pp, alpha_g2 = setup4
        C = commit(pp, F_COEFFS)
        proof = create_witness(pp, F_COEFFS, 5)
        assert verify_opening(C, proof, 5, wrong, alpha_g2) is False

    def test_completeness_random(self, setup4):
        pp, alpha_g2 = setup4
        src = SeededRandomSource(31337)
        for _ in range(2):
            f = random_coeffs(5, src)
            u = src.random_scalar()
            C = commit(pp, f)
            proof = create_witness(pp, f, u)
            assert verify_opening(C, proof, u, eval_poly_at(f, u), alpha_g2)

    def test_soundness_random(self, setup4):
        pp, alpha_g2 = setup4
        src = SeededRandomSource(4242)
        for _ in range(2):
            f = random_coeffs(5, src)
            u = src.random_scalar()
            v = eval_poly_at(f, u) + src.random_scalar()
            C = commit(pp, f)
            proof = create_witness(pp, f, u)
            assert not verify_opening(C, proof, u, v, alpha_g2)

    def test_opening_at_zero(self, setup4):
        pp, alpha_g2 = setup4
        C = commit(pp, F_COEFFS)
        proof = create_witness(pp, F_COEFFS, 0)
        assert verify_opening(C, proof, 0, 5, alpha_g2)

    def test_wrong_point(self, setup4):
        pp, alpha_g2 = setup4
        C = commit(pp, F_COEFFS)
        proof = create_witness(pp, F_COEFFS, 3)
        assert not verify_opening(C, proof, 4, eval_poly_at(F_COEFFS, 3), alpha_g2)

    def test_wrong_commitment(self, setup4):
        pp, alpha_g2 = setup4
        C_other = commit(pp, [1, 1, 1, 1, 1])
        proof = create_witness(pp, F_COEFFS, 5)
        assert not verify_opening(C_other, proof, 5, 975, alpha_g2)

    def test_proof_from_other_setup_fails(self, setup4):
        from pcs.srs import trusted_setup
        other_pp, _ = trusted_setup(4, SeededRandomSource(43))
        pp, alpha_g2 = setup4
        C = commit(pp, F_COEFFS)
        proof = create_witness(other_pp, F_COEFFS, 5)
        assert not verify_opening(C, proof, 5, 975, alpha_g2)

    def test_lower_degree_polynomial(self, setup4):
        """A degree-2 polynomial opens against pp[:3]."""
        pp, alpha_g2 = setup4
        f = [1, 2, 3]
        C = commit(pp[:3], f)
        proof = create_witness(pp, f, 2)
        assert verify_opening(C, proof, 2, 17, alpha_g2)

    def test_degenerate_constant(self, setup4):
        """Degree-0 polynomial: empty quotient, identity proof, still verifies."""
        pp, alpha_g2 = setup4
        C = commit(pp[:1], [7])
        proof = create_witness(pp, [7], 123)
        assert proof is Z1
        assert verify_opening(C, proof, 123, 7, alpha_g2)
        assert not verify_opening(C, proof, 123, 8, alpha_g2)

    def test_polynomial_longer_than_pp(self, setup4):
        with pytest.raises(LengthMismatchError):
            create_witness(setup4.pp, [1] * 6, 2)


# ─────────────────────────────────────────────────────────────────────
# Scheme object
# ─────────────────────────────────────────────────────────────────────

class TestKzgScheme:
    def test_end_to_end(self):
        kzg = Kzg(SeededRandomSource(8))
        pp, alpha_g2 = kzg.setup(len(F_COEFFS) - 1)
        C = kzg.commit(pp, F_COEFFS)
        proof = kzg.prove(pp, F_COEFFS, 5)
        assert kzg.verify(C, proof, 5, 975, alpha_g2)

    def test_default_random_source(self):
        kzg = Kzg()
        pp, _ = kzg.setup(1)
        assert len(pp) == 2
