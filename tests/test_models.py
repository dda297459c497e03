"""Tests for listing record model."""

from datetime import datetime, timezone

import pytest
from pydantic import ValidationError

from swift_object.models import ListingRecord


class TestListingRecord:
    """Test parsing of container listing records."""

    def test_wire_field_names(self, listing_record):
        record = ListingRecord.model_validate(listing_record)

        assert record.size == listing_record["bytes"]
        assert record.etag == listing_record["hash"]
        assert record.last_modified == datetime(2012, 1, 30, 20, 11, 11, tzinfo=timezone.utc)

    def test_extra_fields_ignored(self, listing_record):
        listing_record["subdir"] = "ignored"

        assert ListingRecord.model_validate(listing_record).name == "cat.txt"

    def test_bad_timestamp_rejected(self, listing_record):
        listing_record["last_modified"] = "yesterday-ish"

        with pytest.raises(ValidationError):
            ListingRecord.model_validate(listing_record)

    def test_negative_size_rejected(self, listing_record):
        listing_record["bytes"] = -1

        with pytest.raises(ValidationError):
            ListingRecord.model_validate(listing_record)
