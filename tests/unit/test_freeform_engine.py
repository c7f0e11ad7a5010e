"""Tests for the freeform batch engine."""

import pytest
from pydantic import ValidationError

from freezebatch.models import FreezeStatus, Ingredient, VolumeUnit
from freezebatch.services.freeform_engine import (
    compute_freeform_batch,
    compute_preset_batch,
    find_base_spirit_index,
)


class TestNegroniBatch:
    """Negroni (1.25 : 1 : 1) in a 750ml bottle."""

    def test_twenty_percent_dilution(self, negroni):
        result = compute_freeform_batch(negroni, 750, 20)

        # 150ml water leaves 600ml split 1.25 : 1 : 1
        assert result.water_to_add_ml == 150
        assert result.water_to_add_oz == 5.07
        assert result.base_spirit_name == "Gin"
        assert result.base_spirit_in_bottle_ml == 231
        assert result.base_spirit_in_bottle_oz == 7.81
        assert result.pour_off_ml == 519
        assert result.pour_off_oz == 17.55

        added = {ing.name: ing for ing in result.ingredients_to_add}
        assert added["Campari"].amount_ml == 185
        assert added["Campari"].amount_oz == 6.26
        assert added["Sweet Vermouth"].amount_ml == 185

        assert result.final_abv == 22.4
        assert result.freeze_status == FreezeStatus.SAFE

    def test_no_dilution(self, negroni):
        result = compute_freeform_batch(negroni, 750, 0)

        assert result.water_to_add_ml == 0
        assert result.base_spirit_in_bottle_ml == 288
        assert result.pour_off_ml == 462
        assert [ing.amount_ml for ing in result.ingredients_to_add] == [231, 231]
        assert result.final_abv == 28.0

    def test_totals_and_servings(self, negroni):
        result = compute_freeform_batch(negroni)

        assert result.total_volume_ml == 750
        assert result.total_volume_oz == 25.36
        assert result.servings == 8
        assert result.notes is None

    def test_ingredients_keep_input_order(self, negroni):
        result = compute_freeform_batch(negroni)
        assert [ing.name for ing in result.ingredients_to_add] == ["Campari", "Sweet Vermouth"]
        assert [ing.abv for ing in result.ingredients_to_add] == [25, 16]


class TestMixedUnits:
    """Recipes mixing ml, cl and dashes."""

    def test_converts_before_scaling(self):
        recipe = [
            Ingredient(name="Gin", amount=60, unit=VolumeUnit.ML, abv=40, is_base_spirit=True),
            Ingredient(name="Dry Vermouth", amount=3, unit=VolumeUnit.CL, abv=18),
            Ingredient(name="Orange Bitters", amount=2, unit=VolumeUnit.DASH, abv=45),
        ]

        result = compute_freeform_batch(recipe, 750, 0)

        # 60 + 30 + 1.8 = 91.8ml per serving
        assert result.base_spirit_in_bottle_ml == 490
        assert [ing.amount_ml for ing in result.ingredients_to_add] == [245, 15]
        assert result.pour_off_ml == 260


class TestBaseSpiritSelection:
    """Tests for choosing the base spirit."""

    def test_flagged_ingredient_wins(self, negroni):
        assert find_base_spirit_index(negroni) == 0

    def test_first_flag_wins_when_several(self):
        recipe = [
            Ingredient(name="Lime", amount=1, unit=VolumeUnit.OZ, abv=0),
            Ingredient(name="Rum", amount=2, unit=VolumeUnit.OZ, abv=40, is_base_spirit=True),
            Ingredient(name="Overproof Rum", amount=0.5, unit=VolumeUnit.OZ, abv=63, is_base_spirit=True),
        ]
        assert find_base_spirit_index(recipe) == 1

    def test_highest_abv_promoted(self, unflagged_margarita):
        """Ties go to the earliest ingredient."""
        assert find_base_spirit_index(unflagged_margarita) == 1

        result = compute_freeform_batch(unflagged_margarita)
        assert result.base_spirit_name == "Tequila"
        assert [ing.name for ing in result.ingredients_to_add] == ["Fresh Lime Juice", "Cointreau"]

    def test_no_alcohol_means_no_base(self):
        recipe = [Ingredient(name="Lime", amount=1, unit=VolumeUnit.OZ, abv=0)]
        assert find_base_spirit_index(recipe) is None

    def test_caller_data_untouched(self, unflagged_margarita):
        before = [ing.model_copy() for ing in unflagged_margarita]

        compute_freeform_batch(unflagged_margarita)

        assert unflagged_margarita == before
        assert not any(ing.is_base_spirit for ing in unflagged_margarita)


class TestDegenerateInput:
    """Incomplete recipes give the empty result."""

    def _assert_empty(self, result):
        assert result.final_abv == 0
        assert result.pour_off_ml == 0
        assert result.water_to_add_ml == 0
        assert result.total_volume_ml == 0
        assert result.servings == 0
        assert result.ingredients_to_add == []
        assert result.base_spirit_name == ""
        assert result.freeze_status == FreezeStatus.FREEZE
        assert result.freeze_message == "Add ingredients to calculate"

    def test_empty_list(self):
        self._assert_empty(compute_freeform_batch([]))

    def test_all_zero_abv(self):
        recipe = [
            Ingredient(name="Lime Juice", amount=1, unit=VolumeUnit.OZ, abv=0),
            Ingredient(name="Simple Syrup", amount=0.5, unit=VolumeUnit.OZ, abv=0),
        ]
        self._assert_empty(compute_freeform_batch(recipe))

    def test_zero_volume(self):
        recipe = [
            Ingredient(name="Gin", amount=0, unit=VolumeUnit.OZ, abv=40, is_base_spirit=True),
            Ingredient(name="Campari", amount=0, unit=VolumeUnit.OZ, abv=25),
        ]
        self._assert_empty(compute_freeform_batch(recipe))

    def test_zero_bottle(self, negroni):
        self._assert_empty(compute_freeform_batch(negroni, 0))


class TestProperties:
    """Idempotence and monotonicity."""

    def test_idempotent(self, negroni):
        assert compute_freeform_batch(negroni, 750, 20) == compute_freeform_batch(negroni, 750, 20)

    def test_more_dilution_lowers_abv(self, negroni):
        abvs = [compute_freeform_batch(negroni, 750, d).final_abv for d in (0, 10, 20, 30, 40)]
        assert all(a > b for a, b in zip(abvs, abvs[1:]))

    def test_bigger_bottle_pours_off_more(self, unflagged_margarita):
        pour_offs = [
            compute_freeform_batch(unflagged_margarita, size, 20).pour_off_ml
            for size in (375, 750, 1000, 1750)
        ]
        assert all(a < b for a, b in zip(pour_offs, pour_offs[1:]))


class TestPresetBatch:
    """Tests for built-in recipes through the freeform engine."""

    def test_uses_recommended_dilution(self):
        result = compute_preset_batch("negroni")

        # Negroni is recommended with no water
        assert result.water_to_add_ml == 0
        assert result.pour_off_ml == 462

    def test_explicit_dilution_overrides(self):
        result = compute_preset_batch("negroni", 750, 20)
        assert result.water_to_add_ml == 150
        assert result.pour_off_ml == 519

    def test_daiquiri_gets_water(self):
        result = compute_preset_batch("daiquiri")
        assert result.water_to_add_ml == 60
        assert result.base_spirit_name == "White Rum"

    def test_unknown_recipe(self):
        assert compute_preset_batch("zombie") is None

    @pytest.mark.parametrize("recipe_id", ["margarita", "manhattan", "old-fashioned", "vesper"])
    def test_presets_stay_pourable(self, recipe_id):
        assert compute_preset_batch(recipe_id).freeze_status == FreezeStatus.SAFE


class TestNonFiniteInput:
    """Infinite or overflowing amounts never produce a batch."""

    def test_infinite_amount_rejected(self):
        with pytest.raises(ValidationError):
            Ingredient(name="Gin", amount=float("inf"), abv=40)

    def test_nan_abv_rejected(self):
        with pytest.raises(ValidationError):
            Ingredient(name="Gin", amount=60, abv=float("nan"))

    def test_overflowing_amount_gives_empty_result(self):
        """1e308 oz is finite but overflows once converted to ml."""
        recipe = [
            Ingredient(name="Gin", amount=1e308, unit=VolumeUnit.OZ, abv=40, is_base_spirit=True),
            Ingredient(name="Campari", amount=1, unit=VolumeUnit.OZ, abv=25),
        ]

        result = compute_freeform_batch(recipe)

        assert result.final_abv == 0
        assert result.pour_off_ml == 0
        assert result.freeze_status == FreezeStatus.FREEZE
        assert result.freeze_message == "Add ingredients to calculate"

    def test_infinite_bottle_gives_empty_result(self, negroni):
        result = compute_freeform_batch(negroni, float("inf"))
        assert result.freeze_status == FreezeStatus.FREEZE
        assert result.total_volume_ml == 0


class TestClassificationUsesReportedAbv:
    """Status follows the 1-decimal ABV shown to the user."""

    def test_just_under_safe_threshold_reports_safe(self):
        """Unrounded ABV is 21.973, which rounds to 22.0 and classifies safe."""
        recipe = [
            Ingredient(name="Gin", amount=122, unit=VolumeUnit.ML, abv=40, is_base_spirit=True),
            Ingredient(name="Juice", amount=100, unit=VolumeUnit.ML, abv=0),
        ]

        result = compute_freeform_batch(recipe, 750, 0)

        # 122:100 scaled into 750ml -> 412ml gin, 338ml juice
        assert result.base_spirit_in_bottle_ml == 412
        assert result.final_abv == 22.0
        assert result.freeze_status == FreezeStatus.SAFE
        assert result.freeze_message == "22.0% ABV will stay perfectly pourable."
