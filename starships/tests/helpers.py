from unittest import mock

import requests

from starships.models import Starship

FIRST_PAGE = "https://swapi.dev/api/starships/"


def make_response(payload=None, status_code=200, content_type="application/json", json_error=None):
    response = mock.Mock()
    response.status_code = status_code
    response.headers = {"Content-Type": content_type}
    if status_code >= 400:
        response.raise_for_status.side_effect = requests.exceptions.HTTPError(f"{status_code} Error")
    if json_error is not None:
        response.json.side_effect = json_error
    else:
        response.json.return_value = payload
    return response


def make_session(pages):
    """Session whose get() serves ``pages`` ({url: response}) and records calls."""
    session = mock.Mock()

    def get(url, timeout=None):
        outcome = pages[url]
        if isinstance(outcome, Exception):
            raise outcome
        return outcome

    session.get.side_effect = get
    return session


def swapi_ship(name, **overrides):
    data = {
        "name": name,
        "model": f"{name} model",
        "manufacturer": "Kuat Drive Yards",
        "starship_class": "Star Destroyer",
        "crew": "47,060",
        "passengers": "n/a",
        "url": f"https://swapi.dev/api/starships/{name.lower()}/",
    }
    data.update(overrides)
    return data


def create_starship(**overrides):
    data = {
        "name": "X-Wing",
        "model": "T-65B",
        "manufacturer": "Incom Corporation",
        "starship_class": "Starfighter",
        "crew": "1",
        "passengers": "0",
    }
    data.update(overrides)
    return Starship.objects.create(**data)
