"""Form payload builders for route tests."""


def form_data(**overrides) -> dict:
    """Valid create/update body, with per-test overrides."""
    data = {
        "firstName": "Jo",
        "lastName": "Lee",
        "email": "jo@x.com",
        "age": "30",
        "bio": "",
    }
    data.update(overrides)
    return data
