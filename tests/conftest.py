"""
Pytest configuration and fixtures.
"""
import pytest
from unittest.mock import AsyncMock, Mock
from caniburn.providers.base import FireDataProvider
from caniburn.schemas.location import Coordinates, Location, ReverseGeocodeResult


FIRMS_HEADER = "latitude,longitude,brightness,scan,track,acq_date,acq_time,satellite,instrument,confidence,version,bright_t31,frp,daynight"


def firms_row(latitude, longitude, acq_date, acq_time="1230", confidence=70, brightness=300.5):
	"""One FIRMS area CSV data row."""
	return f"{latitude},{longitude},{brightness},1.2,1.1,{acq_date},{acq_time},N,VIIRS,{confidence},2.0NRT,290.2,15.5,D"


def firms_csv(*rows):
	return "\n".join([FIRMS_HEADER, *rows])


def make_provider(name="Stub Provider", location_record=None, coordinate_record=None, supports=True):
	"""Mock provider honouring the FireDataProvider contract."""
	provider = Mock(spec=FireDataProvider)
	provider.name = name
	provider.coverage_regions = Mock(return_value=["Stubland"])
	provider.supports_location = Mock(return_value=supports)
	provider.supports_coordinates = Mock(return_value=supports)
	provider.status_for_location = AsyncMock(return_value=location_record)
	provider.status_for_coordinates = AsyncMock(return_value=coordinate_record)
	provider.aclose = AsyncMock()
	return provider


def make_location(province, county, country):
	return Location(province=province, state=province, county=county, country=country)


@pytest.fixture
def ottawa():
	"""Coordinate inside both the North America and the Canada boxes."""
	return Coordinates(latitude=45.0, longitude=-75.0)


@pytest.fixture
def toronto_location():
	return make_location("Ontario", "Toronto", "Canada")


@pytest.fixture
def unknown_canadian_location():
	return make_location("TestProvince123456789", "TestCounty123456789", "Canada")


@pytest.fixture
def mock_firms_client():
	"""Mock FIRMS client."""
	client = AsyncMock()
	client.fetch_area_csv = AsyncMock(return_value=FIRMS_HEADER)
	client.close = AsyncMock()
	return client


@pytest.fixture
def mock_cwfis_client():
	"""Mock CWFIS client returning empty feature collections."""
	client = AsyncMock()
	client.fetch_active_fires_by_agency = AsyncMock(return_value={"type": "FeatureCollection", "features": []})
	client.fetch_active_fires_in_bbox = AsyncMock(return_value={"type": "FeatureCollection", "features": []})
	client.fetch_fire_weather_near = AsyncMock(return_value={"type": "FeatureCollection", "features": []})
	client.close = AsyncMock()
	return client


@pytest.fixture
def mock_location_service(toronto_location):
	"""Mock geocoder resolving every coordinate to Toronto."""
	service = AsyncMock()
	service.reverse_geocode = AsyncMock(return_value=ReverseGeocodeResult(location=toronto_location, accuracy="high"))
	service.aclose = AsyncMock()
	return service


@pytest.fixture
def fake_clock():
	"""Monotonic clock stand-in for TTLCache; set .return_value to move time."""
	return Mock(return_value=1000.0)
