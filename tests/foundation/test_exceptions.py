"""Tests for the MONEAT exception hierarchy."""

from __future__ import annotations

import pytest


class TestMONEATError:
    """Test base MONEATError class."""

    def test_basic_error(self):
        """MONEATError should work with just a message."""
        from moneat.foundation.exceptions import MONEATError

        err = MONEATError("Something went wrong")
        assert "Something went wrong" in str(err)
        assert err.message == "Something went wrong"
        assert err.suggestion is None

    def test_error_with_suggestion(self):
        """MONEATError should include suggestion in message."""
        from moneat.foundation.exceptions import MONEATError

        err = MONEATError("Something went wrong", suggestion="Try this instead")
        assert "Suggestion: Try this instead" in str(err)
        assert err.suggestion == "Try this instead"

    def test_error_with_details(self):
        from moneat.foundation.exceptions import MONEATError

        err = MONEATError("Error", details={"key": "value"})
        assert err.details == {"key": "value"}


class TestContractErrors:
    def test_fitness_dimension_error_reports_sizes(self):
        from moneat.foundation.exceptions import ContractError, FitnessDimensionError

        err = FitnessDimensionError(3, 2)
        assert isinstance(err, ContractError)
        assert "2 objectives, expected 3" in str(err)
        assert err.details == {"expected": 3, "actual": 2}

    def test_sample_data_error_mentions_reference(self):
        from moneat.foundation.exceptions import SampleDataError

        assert "reference 4" in str(SampleDataError(7, 4))
        assert "reference" not in SampleDataError(7).message

    def test_unknown_component_lists_available(self):
        from moneat.foundation.exceptions import ConfigurationError, UnknownComponentError

        err = UnknownComponentError("sampling strategy", "bogus", ["no_noise", "sedr"])
        assert isinstance(err, ConfigurationError)
        assert "no_noise, sedr" in str(err)


def test_public_namespace_reexports():
    import moneat.exceptions as public
    from moneat.foundation import exceptions

    assert public.MONEATError is exceptions.MONEATError
    assert "InvalidProgressError" in public.__all__
    with pytest.raises(AttributeError):
        public.NotAnError  # noqa: B018
