"""
Heads Up - Error Bag Tests
"""

import pytest
from pydantic import BaseModel, ValidationError

from headsup.forms import first_errors, is_error_bag, normalize_error_bag


class SignupForm(BaseModel):
    email: str
    age: int


def _validation_error() -> ValidationError:
    with pytest.raises(ValidationError) as exc_info:
        SignupForm(age="not a number")
    return exc_info.value


class TestErrorBags:
    """Tests for error bag detection and normalization."""
    
    def test_is_error_bag(self):
        assert is_error_bag({"foo": "bar"})
        assert is_error_bag(_validation_error())
        assert not is_error_bag("foo")
        assert not is_error_bag(["foo", "bar"])
    
    def test_mapping_values(self):
        bag = {"foo": "bar", "baz": ["one", "two"], "empty": [], "none": None}
        
        assert normalize_error_bag(bag) == {"foo": ["bar"], "baz": ["one", "two"]}
    
    def test_pydantic_validation_error(self):
        bag = normalize_error_bag(_validation_error())
        
        assert set(bag) == {"email", "age"}
        assert all(isinstance(error, str) and error for error in bag["age"])
    
    def test_nested_location_is_dotted(self):
        class Address(BaseModel):
            zip: int
        
        class Order(BaseModel):
            address: Address
        
        with pytest.raises(ValidationError) as exc_info:
            Order(address={"zip": "abc"})
        
        assert list(normalize_error_bag(exc_info.value)) == ["address.zip"]
    
    def test_first_errors(self):
        assert first_errors({"foo": ["one", "two"]}) == {"foo": "one"}
    
    def test_unsupported_value(self):
        with pytest.raises(TypeError):
            normalize_error_bag(42)
