import matplotlib

matplotlib.use("Agg")

import pytest

from rgg_coloring.graph_generation import Distribution, create_graph


@pytest.fixture(params=list(Distribution), ids=lambda d: d.name.lower())
def distribution(request):
    return request.param


@pytest.fixture
def random_graph(distribution):
    radius = 0.3 if distribution is Distribution.UNIT_SPHERE else 0.12
    return create_graph(250, radius, distribution, seed=7)
