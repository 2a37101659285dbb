"""
Tests for the HTTP routes (/solve, /render, /output).

Test Groups:
- W1-W6: /solve
- W7-W10: /render + /output
"""

import pytest

from app import create_app
from app.main import routes
from app.main.hanoi_solver.models import HanoiSolution, SearchStatus


@pytest.fixture
def app(tmp_path):
    return create_app({
        'TESTING': True,
        'OUTPUT_FOLDER': str(tmp_path / 'output'),
        'HANOI_MAX_DISCS': 6,
    })


@pytest.fixture
def client(app):
    return app.test_client()


# ========== /solve ==========

def test_W1_solve_json_body(client):
    """W1: POST {"discs": 3} → 7 moves"""
    print("\nTest W1: Solve JSON...", end=" ")

    response = client.post('/solve', json={'discs': 3})
    data = response.get_json()

    assert response.status_code == 200
    assert data['success'] is True
    assert data['solution']['move_count'] == 7
    assert data['solution']['steps'][-1]['pegs'] == [2, 2, 2]

    print("✓")


def test_W2_solve_query_string(client):
    """W2: GET ?discs=1"""
    response = client.get('/solve?discs=1')
    data = response.get_json()

    assert response.status_code == 200
    assert data['solution']['moves'] == [{'disc': 0, 'from_peg': 0, 'to_peg': 2}]


def test_W3_solve_default_discs(client):
    """W3: No input → 3 discs"""
    data = client.get('/solve').get_json()
    assert data['solution']['n_discs'] == 3


@pytest.mark.parametrize("payload", [
    {'discs': 0},
    {'discs': -4},
    {'discs': 'abc'},
    {'discs': 2.5},
    {'discs': True},
    [3],
    5,
    'discs',
])
def test_W4_solve_invalid_input(client, payload):
    """W4: Invalid disc counts → 400 with error message"""
    response = client.post('/solve', json=payload)

    assert response.status_code == 400
    assert 'error' in response.get_json()


def test_W5_solve_too_many_discs(client):
    """W5: Above HANOI_MAX_DISCS → 400"""
    response = client.post('/solve', json={'discs': 7})

    assert response.status_code == 400
    assert '<= 6' in response.get_json()['error']


def test_W6_solve_no_solution(client, monkeypatch):
    """W6: No solution is reported, not raised"""
    monkeypatch.setattr(
        routes, 'solve_hanoi',
        lambda n: HanoiSolution(n_discs=n, status=SearchStatus.EXHAUSTED)
    )

    response = client.post('/solve', json={'discs': 2})
    data = response.get_json()

    assert response.status_code == 422
    assert data['success'] is False
    assert data['solution']['status'] == 'exhausted'


# ========== /render + /output ==========

def test_W7_render_and_serve(client, tmp_path):
    """W7: /render writes the filmstrip, /output serves it"""
    print("\nTest W7: Render + Serve...", end=" ")

    response = client.post('/render', json={'discs': 2})
    data = response.get_json()

    assert response.status_code == 200
    images = data['images']['solution_visualizations']
    assert images == ['hanoi_2discs_filmstrip.png']
    assert (tmp_path / 'output' / images[0]).exists()

    image_response = client.get(f'/output/{images[0]}')
    assert image_response.status_code == 200
    assert image_response.mimetype == 'image/png'

    print("✓")


def test_W8_output_missing(client):
    """W8: Unknown file → 404"""
    response = client.get('/output/missing.png')
    assert response.status_code == 404


def test_W9_render_invalid_input(client):
    """W9: /render validates like /solve"""
    response = client.post('/render', json={'discs': 0})
    assert response.status_code == 400


def test_W10_render_non_object_body(client):
    """W10: JSON body that is not an object → 400 JSON error"""
    response = client.post('/render', json=[2])

    assert response.status_code == 400
    assert response.get_json()['error'] == 'Request body must be a JSON object'
