"""Tests for src/domain/models/__init__.py: package exports."""

from src.domain.models import __all__ as domain_all
from src.domain.models import (
    # spot-check one import from each module
    Entity,
    ItemsPage,
    ListParams,
    RequestStatus,
    ServiceRequest,
)


def test_domain_models_exports_31_names():
    assert len(domain_all) == 31


def test_every_exported_name_is_importable():
    import src.domain.models as models

    for name in domain_all:
        assert hasattr(models, name), name


def test_request_status_importable_from_package():
    assert RequestStatus.PENDING == "pending"


def test_entity_importable_from_package():
    assert Entity.__name__ == "Entity"


def test_service_request_importable_from_package():
    assert issubclass(ServiceRequest, Entity)


def test_list_params_importable_from_package():
    assert ListParams().page == 1


def test_items_page_importable_from_package():
    assert ItemsPage().total == 0
