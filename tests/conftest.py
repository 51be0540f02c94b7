"""Shared fixtures: a fake ETABS instance and a session attached to it."""

import pytest

from etabs_client import EngineSession, EtabsModel, ManagerRegistry

from .fake_engine import FakeEtabsObject, FakeHelper, FakeSapModel, make_api


@pytest.fixture
def sap_model():
    return FakeSapModel()


@pytest.fixture
def etabs_object(sap_model):
    return FakeEtabsObject(sap_model)


@pytest.fixture
def helper(etabs_object):
    return FakeHelper(etabs_object)


@pytest.fixture
def api(helper):
    return make_api(helper)


@pytest.fixture
def session(api, sap_model):
    session = EngineSession.connect(api=api)
    sap_model.reset_calls()
    yield session
    session.dispose()


@pytest.fixture
def registry():
    return ManagerRegistry()


@pytest.fixture
def model(session, registry):
    return EtabsModel(session, registry=registry)


@pytest.fixture
def grid_model(model, sap_model):
    """Two 3 m stories on a 2 x 2 grid, a DEAD pattern, C30 concrete and a COL400 section."""
    model.info.new_grid_only(2, 3.0, 3.0, 2, 2, 6.0, 6.0)
    model.load_patterns.add("DEAD", 1, 1.0)
    model.materials.set_material("C30", 2)
    model.frame_sections.set_rectangle("COL400", "C30", 0.4, 0.4)
    sap_model.reset_calls()
    return model
