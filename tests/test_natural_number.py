import pytest

from natural_number import NaturalNumber


class TestNaturalNumber:
    """
    Tests for the in-place natural number type.
    """

    # --- Construction ---

    @pytest.mark.parametrize("value, expected", [
        (0, 0),
        (7, 7),
        ("12345678901234567890", 12345678901234567890),
        ("  42\n", 42),
    ])
    def test_construction(self, value, expected):
        assert NaturalNumber(value).to_int() == expected

    def test_copy_construction_is_independent(self):
        original = NaturalNumber(99)
        copy = NaturalNumber(original)
        copy.increment()
        assert original == 99
        assert copy == 100

    @pytest.mark.parametrize("bad", [-1, "", "-3", "12a", "1.5", "٣"])
    def test_invalid_values_raise_value_error(self, bad):
        with pytest.raises(ValueError):
            NaturalNumber(bad)

    @pytest.mark.parametrize("bad", [1.0, None, True, [1]])
    def test_invalid_types_raise_type_error(self, bad):
        with pytest.raises(TypeError):
            NaturalNumber(bad)

    # --- Digit operations ---

    def test_divide_by_10_returns_last_digit(self):
        n = NaturalNumber(1234)
        assert n.divide_by_10() == 4
        assert n == 123

    def test_multiply_by_10_appends_digit(self):
        n = NaturalNumber(123)
        n.multiply_by_10(4)
        assert n == 1234

    def test_multiply_by_10_on_zero(self):
        n = NaturalNumber()
        n.multiply_by_10(0)
        assert n.is_zero()

    # --- Arithmetic ---

    def test_divide_returns_remainder_and_keeps_quotient(self):
        n = NaturalNumber(100)
        remainder = n.divide(NaturalNumber(7))
        assert n == 14
        assert remainder == 2

    def test_multiply_add_subtract(self):
        n = NaturalNumber(6)
        n.multiply(NaturalNumber(7))
        n.add(NaturalNumber(8))
        n.subtract(NaturalNumber(50))
        assert n.is_zero()

    def test_decrement_zero_is_a_contract_violation(self):
        with pytest.raises(AssertionError):
            NaturalNumber(0).decrement()

    # --- Copy and transfer ---

    def test_copy_from_keeps_source(self):
        n, m = NaturalNumber(1), NaturalNumber(2)
        n.copy_from(m)
        assert n == 2 and m == 2

    def test_transfer_from_clears_source(self):
        n, m = NaturalNumber(1), NaturalNumber(2)
        n.transfer_from(m)
        assert n == 2
        assert m.is_zero()

    # --- Comparison and display ---

    def test_ordering(self):
        small, big = NaturalNumber(3), NaturalNumber("30")
        assert small.compare_to(big) < 0
        assert big.compare_to(small) > 0
        assert small.compare_to(NaturalNumber(3)) == 0
        assert small < big and big > small and small <= 3 and big >= 30

    def test_str_and_repr(self):
        n = NaturalNumber(2 ** 70)
        assert str(n) == str(2 ** 70)
        assert repr(NaturalNumber(5)) == "NaturalNumber(5)"

    def test_unhashable(self):
        with pytest.raises(TypeError):
            hash(NaturalNumber(1))

    def test_new_instance_is_zero(self):
        assert NaturalNumber(5).new_instance().is_zero()
