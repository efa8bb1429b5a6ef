from string_analyzer.analyzer import compute_sha256


def test_create_string(client):
    response = client.post("/strings", json={"value": "Racecar"})

    assert response.status_code == 201
    body = response.json()
    assert body["id"] == compute_sha256("Racecar")
    assert body["value"] == "Racecar"
    assert body["properties"] == {
        "length": 7,
        "is_palindrome": True,
        "unique_characters": 5,
        "word_count": 1,
        "sha256_hash": compute_sha256("Racecar"),
        "character_frequency_map": {"R": 1, "a": 2, "c": 2, "e": 1, "r": 1},
    }
    assert body["created_at"]


def test_create_duplicate_returns_conflict(client):
    assert client.post("/strings", json={"value": "dup"}).status_code == 201

    response = client.post("/strings", json={"value": "dup"})
    assert response.status_code == 409
    assert "error" in response.json()


def test_create_missing_value(client):
    response = client.post("/strings", json={})
    assert response.status_code == 400
    assert response.json() == {"error": "Missing 'value' field"}

    assert client.post("/strings", json={"value": None}).status_code == 400
    assert client.post("/strings", json={"value": ""}).status_code == 400
    assert client.post("/strings").status_code == 400


def test_create_non_string_value_is_unprocessable(client):
    response = client.post("/strings", json={"value": 123})

    assert response.status_code == 422
    assert response.json() == {"error": "'value' must be a string"}
    assert client.get("/strings").json()["count"] == 0


def test_get_after_create_matches(client):
    created = client.post("/strings", json={"value": "hello world"}).json()

    response = client.get("/strings/hello world")
    assert response.status_code == 200
    assert response.json() == created


def test_get_missing_returns_not_found(client):
    response = client.get("/strings/missing")
    assert response.status_code == 404
    assert response.json() == {"error": "String does not exist in the system"}


def test_value_with_slash_is_addressable(client):
    client.post("/strings", json={"value": "and/or"})

    assert client.get("/strings/and%2For").json()["value"] == "and/or"
    assert client.delete("/strings/and/or").status_code == 204


def test_delete_then_get(client):
    client.post("/strings", json={"value": "temporary"})

    response = client.delete("/strings/temporary")
    assert response.status_code == 204
    assert response.content == b""

    assert client.get("/strings/temporary").status_code == 404
    assert client.delete("/strings/temporary").status_code == 404


def test_list_without_filters(seeded_client):
    body = seeded_client.get("/strings").json()

    assert body["count"] == 7
    assert len(body["data"]) == 7
    assert body["filters_applied"] == {}


def test_list_exact_length(seeded_client):
    body = seeded_client.get("/strings", params={"min_length": 5, "max_length": 5}).json()

    assert sorted(item["value"] for item in body["data"]) == ["hello", "stats"]
    assert all(item["properties"]["length"] == 5 for item in body["data"])
    assert body["filters_applied"] == {"min_length": 5, "max_length": 5}


def test_list_palindrome_flag(seeded_client):
    palindromes = seeded_client.get("/strings", params={"is_palindrome": "true"}).json()
    assert sorted(item["value"] for item in palindromes["data"]) == ["noon", "racecar", "stats"]
    assert palindromes["filters_applied"] == {"is_palindrome": True}

    others = seeded_client.get("/strings", params={"is_palindrome": "no"}).json()
    assert others["count"] == 4
    assert others["filters_applied"] == {"is_palindrome": False}


def test_list_word_count_and_character(seeded_client):
    body = seeded_client.get("/strings", params={"word_count": 3, "contains_character": "u"}).json()

    assert [item["value"] for item in body["data"]] == ["level up now"]
    assert body["filters_applied"] == {"word_count": 3, "contains_character": "u"}


def test_list_rejects_invalid_parameters(client):
    assert client.get("/strings", params={"min_length": "abc"}).status_code == 400
    assert client.get("/strings", params={"word_count": -1}).status_code == 400

    response = client.get("/strings", params={"contains_character": "ab"})
    assert response.status_code == 400
    assert response.json()["error"] == "Validation failed"


def test_natural_language_filter(seeded_client):
    response = seeded_client.get(
        "/strings/filter-by-natural-language",
        params={"query": "all single word palindromic strings"},
    )

    assert response.status_code == 200
    body = response.json()
    assert sorted(item["value"] for item in body["data"]) == ["noon", "racecar", "stats"]
    assert body["count"] == 3
    assert body["interpreted_query"] == {
        "original": "all single word palindromic strings",
        "parsed_filters": {"is_palindrome": True, "word_count": 1},
    }


def test_natural_language_longer_than(seeded_client):
    body = seeded_client.get(
        "/strings/filter-by-natural-language",
        params={"query": "strings longer than 10 that are palindromic"},
    ).json()

    assert body["interpreted_query"]["parsed_filters"] == {"is_palindrome": True, "min_length": 11}
    assert body["count"] == 0


def test_natural_language_unrecognised_matches_everything(seeded_client):
    body = seeded_client.get(
        "/strings/filter-by-natural-language", params={"query": "anything at all"}
    ).json()

    assert body["count"] == 7
    assert body["interpreted_query"]["parsed_filters"] == {}


def test_natural_language_requires_query(client):
    response = client.get("/strings/filter-by-natural-language")
    assert response.status_code == 400
    assert response.json() == {"error": "Missing 'query' parameter"}

    assert client.get("/strings/filter-by-natural-language", params={"query": "  "}).status_code == 400


def test_apps_do_not_share_storage(tmp_path):
    from fastapi.testclient import TestClient
    from string_analyzer.main import create_app

    first = create_app(database_url=f"sqlite:///{tmp_path / 'first.db'}")
    second = create_app(database_url=f"sqlite:///{tmp_path / 'second.db'}")

    with TestClient(first) as first_client, TestClient(second) as second_client:
        first_client.post("/strings", json={"value": "only here"})
        assert first_client.get("/strings").json()["count"] == 1
        assert second_client.get("/strings").json()["count"] == 0


def test_health_and_root(client):
    assert client.get("/health").json() == {"status": "healthy"}
    assert "POST /strings" in client.get("/").json()["endpoints"]


def test_list_rejects_lengths_beyond_integer_range(seeded_client):
    response = seeded_client.get("/strings", params={"min_length": "99999999999999999999"})

    assert response.status_code == 400
    assert response.json()["error"] == "Validation failed"
    assert seeded_client.get("/strings", params={"word_count": 2**63 - 1}).json()["count"] == 0


def test_natural_language_huge_length_matches_nothing(seeded_client):
    response = seeded_client.get(
        "/strings/filter-by-natural-language",
        params={"query": "strings longer than 99999999999999999999"},
    )

    assert response.status_code == 200
    body = response.json()
    assert body["count"] == 0
    assert body["interpreted_query"]["parsed_filters"] == {"min_length": 2**63 - 1}


def test_create_storage_failure_returns_message(client, monkeypatch):
    from string_analyzer import crud
    from string_analyzer.exceptions import StorageError

    def broken_create(db, value):
        raise StorageError("database is locked")

    monkeypatch.setattr(crud, "create_string_record", broken_create)
    response = client.post("/strings", json={"value": "locked out"})

    assert response.status_code == 500
    assert response.json() == {"error": "database is locked"}
