import pytest
from marshmallow import Schema, ValidationError

from carhire.models import Identity
from carhire.serializer import IdentityField, EnumField, JSendStatus


class IdentitySchema(Schema):
    owner = IdentityField()


class StatusSchema(Schema):
    status = EnumField(JSendStatus)


class TestIdentityField:

    def test_dump(self):
        assert IdentitySchema().dump({"owner": Identity(b"\x0a\xff")}) == {"owner": "0aff"}

    def test_load(self):
        assert IdentitySchema().load({"owner": "0aff"}) == {"owner": Identity(b"\x0a\xff")}

    @pytest.mark.parametrize("value", ["not hex", "abc", 12])
    def test_load_invalid(self, value):
        with pytest.raises(ValidationError) as error:
            IdentitySchema().load({"owner": value})
        assert "owner" in error.value.messages


class TestEnumField:

    def test_dump(self):
        assert StatusSchema().dump({"status": JSendStatus.FAIL}) == {"status": "fail"}

    def test_load(self):
        assert StatusSchema().load({"status": "success"}) == {"status": JSendStatus.SUCCESS}

    def test_load_invalid(self):
        with pytest.raises(ValidationError):
            StatusSchema().load({"status": "maybe"})

    def test_requires_enum(self):
        with pytest.raises(ValueError):
            EnumField(dict)
