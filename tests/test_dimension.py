import pytest
from dimunit.dimension import Dimension, Dimensions


@pytest.fixture
def acceleration():
    return Dimensions(length=1, time=-2)


@pytest.fixture
def force():
    return Dimensions({Dimension.Mass: 1, Dimension.Length: 1, Dimension.Time: -2})


class TestConstruction:
    def test_keywords_and_enum_keys_agree(self):
        assert Dimensions(mass=1, time=-2) == Dimensions({Dimension.Mass: 1, Dimension.Time: -2})

    def test_pairs(self):
        dims = Dimensions([(Dimension.Length, 2), ("time", -1)])
        assert dims[Dimension.Length] == 2
        assert dims[Dimension.Time] == -1

    def test_duplicate_keys_overwrite(self):
        dims = Dimensions([(Dimension.Mass, 1), (Dimension.Mass, 3)])
        assert dims[Dimension.Mass] == 3

    def test_keywords_applied_last(self):
        assert Dimensions({"mass": 1}, mass=2)["mass"] == 2

    def test_copy_of_other_vector(self, force):
        assert Dimensions(force) == force

    def test_non_integer_exponent(self):
        with pytest.raises(ValueError):
            Dimensions(mass=1.5)

    def test_unknown_dimension(self):
        with pytest.raises(KeyError):
            Dimensions(speed=1)

    def test_from_array(self):
        assert Dimensions.from_array([1, 0, -2, 0, 0, 0, 0]) == Dimensions(mass=1, time=-2)

    def test_from_array_wrong_shape(self):
        with pytest.raises(ValueError):
            Dimensions.from_array([1, 2])

    def test_from_array_non_integer(self):
        with pytest.raises(ValueError):
            Dimensions.from_array([0.5, 0, 0, 0, 0, 0, 0])

    def test_to_array_is_a_copy(self, force):
        array = force.to_array()
        array[Dimension.Mass.value] = 5
        assert force[Dimension.Mass] == 1


equality_cases = [
    ("same_empty", Dimensions(), Dimensions(), True),
    ("same_one", Dimensions(time=1), Dimensions(time=1), True),
    ("same_mult", Dimensions(time=1, length=-2), Dimensions(time=1, length=-2), True),
    ("diff_one_empty", Dimensions(), Dimensions(time=1, length=-2), False),
    ("diff_same_dim", Dimensions(time=1), Dimensions(time=2), False),
    ("diff_same_pow", Dimensions(length=1), Dimensions(time=1), False),
    ("diff_numdim", Dimensions(time=1, length=2), Dimensions(time=2), False),
    ("diff_one_same_dim", Dimensions(length=1, time=1), Dimensions(length=1, time=2), False),
    ("zero_padding", Dimensions(mass=1, time=-2), Dimensions(mass=1, time=-2, length=0), True),
]


class TestEquality:
    @pytest.mark.parametrize("name,a,b,expected", equality_cases, ids=[c[0] for c in equality_cases])
    def test_equality(self, name, a, b, expected):
        assert (a == b) is expected
        assert a.matches(b) is expected

    @pytest.mark.parametrize("name,a,b,expected", equality_cases, ids=[c[0] for c in equality_cases])
    def test_symmetric(self, name, a, b, expected):
        assert (a == b) == (b == a)

    @pytest.mark.parametrize("name,a,b,expected", equality_cases, ids=[c[0] for c in equality_cases])
    def test_reflexive(self, name, a, b, expected):
        assert a == a
        assert b == b

    def test_hash_ignores_explicit_zeros(self):
        table = {Dimensions(mass=1): "mass"}
        assert table[Dimensions(mass=1, length=0)] == "mass"

    def test_not_equal_to_other_types(self, force):
        assert force != {Dimension.Mass: 1, Dimension.Length: 1, Dimension.Time: -2}


class TestMappingView:
    def test_zero_entries_are_absent(self):
        dims = Dimensions(mass=1, time=-2, length=0, current=0)
        assert len(dims) == 2
        assert list(dims) == [Dimension.Mass, Dimension.Time]
        assert Dimension.Length not in dims
        assert Dimension.Mass in dims
        assert dims[Dimension.Length] == 0

    def test_items_in_canonical_order(self):
        dims = Dimensions(chemical_amount=1, time=-1, mass=2)
        assert dict(dims) == {Dimension.Mass: 2, Dimension.Time: -1, Dimension.ChemicalAmount: 1}
        assert list(dims.items())[0] == (Dimension.Mass, 2)

    def test_dimensionless(self):
        assert Dimensions().is_dimensionless
        assert Dimensions(length=0).is_dimensionless
        assert not Dimensions(length=1).is_dimensionless


class TestAlgebra:
    def test_multiply_sums_exponents(self, acceleration):
        assert acceleration * acceleration == Dimensions(length=2, time=-4)

    def test_multiply_over_key_union(self, acceleration):
        assert acceleration * Dimensions(mass=1) == Dimensions(mass=1, length=1, time=-2)

    def test_divide_subtracts_exponents(self, acceleration, force):
        assert force / acceleration == Dimensions(mass=1)

    def test_divide_cancels_to_dimensionless(self, acceleration):
        result = acceleration / acceleration
        assert result.is_dimensionless
        assert len(result) == 0
        assert str(result) == ""

    def test_power(self, acceleration):
        assert acceleration**2 == Dimensions(length=2, time=-4)
        assert acceleration**-1 == Dimensions(length=-1, time=2)

    def test_operands_unchanged(self, acceleration, force):
        _ = force * acceleration
        _ = force / acceleration
        assert force == Dimensions(mass=1, length=1, time=-2)
        assert acceleration == Dimensions(length=1, time=-2)


class TestRender:
    @pytest.mark.parametrize(
        "dims,expected",
        [
            (Dimensions(), ""),
            (Dimensions(length=1, time=-2), "m s^-2"),
            (Dimensions(time=-2, length=1), "m s^-2"),
            (Dimensions(mass=1, length=2, time=-2), "kg m^2 s^-2"),
            (Dimensions(mass=2, time=-1), "kg^2 s^-1"),
            (Dimensions(current=1, temperature=-1, luminosity=3, chemical_amount=1), "A K^-1 cd^3 mol"),
        ],
    )
    def test_str(self, dims, expected):
        assert str(dims) == expected

    def test_repr(self):
        assert repr(Dimensions(time=-2, mass=1)) == "Dimensions(mass=1, time=-2)"
        assert repr(Dimensions()) == "Dimensions()"

    def test_symbols(self):
        assert [d.symbol for d in Dimension] == ["kg", "m", "s", "A", "K", "cd", "mol"]
