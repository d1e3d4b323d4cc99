def test_create_send_and_read_chat(client, huggingface):
    created = client.put("/chats")
    assert created.status_code == 201
    chat_id = created.json()["chatId"]

    sent = client.post(f"/chats/{chat_id}", json={"content": "Hi"})
    assert sent.status_code == 201
    response = sent.json()["response"]
    assert response["content"] == "Hello"
    assert response["role"] == "assistant"
    assert response["timestamp"]
    assert "id" not in response

    history = client.get(f"/chats/{chat_id}")
    assert history.status_code == 200
    body = history.json()
    assert body["chatId"] == chat_id
    assert [t["role"] for t in body["history"]] == ["user", "assistant"]
    assert [t["content"] for t in body["history"]] == ["Hi", "Hello"]
    assert all("id" not in t for t in body["history"])


def test_new_chat_history_is_empty(client):
    chat_id = client.put("/chats").json()["chatId"]
    assert client.get(f"/chats/{chat_id}").json()["history"] == []


def test_unknown_chat_is_404(client):
    assert client.get("/chats/nope").status_code == 404
    resp = client.post("/chats/nope", json={"content": "Hi"})
    assert resp.status_code == 404


def test_missing_or_blank_content_is_400(client):
    chat_id = client.put("/chats").json()["chatId"]
    for body in ({}, {"content": "   "}, {"content": 12}):
        resp = client.post(f"/chats/{chat_id}", json=body)
        assert resp.status_code == 400
        assert resp.json()["detail"] == "content required"
    assert client.post(f"/chats/{chat_id}").status_code == 400
    assert client.get(f"/chats/{chat_id}").json()["history"] == []


def test_invalid_model_is_400_with_allowed_models(client, services):
    chat_id = client.put("/chats").json()["chatId"]
    resp = client.post(f"/chats/{chat_id}", json={"content": "Hi", "config": {"model": "gpt-4"}})
    assert resp.status_code == 400
    detail = resp.json()["detail"]
    for model in services.catalog.allowed_models():
        assert model in detail


def test_model_routes_to_ollama(client, ollama):
    chat_id = client.put("/chats").json()["chatId"]
    resp = client.post(
        f"/chats/{chat_id}",
        json={"content": "Hi", "config": {"model": "mistral", "temperature": "0.3"}},
    )
    assert resp.status_code == 201
    assert resp.json()["response"]["content"] == "from ollama"
    assert ollama.calls[0][2].temperature == 0.3


def test_backend_failure_is_500_and_history_untouched(client, huggingface):
    chat_id = client.put("/chats").json()["chatId"]
    huggingface.fail = True
    resp = client.post(f"/chats/{chat_id}", json={"content": "Hi"})
    assert resp.status_code == 500
    assert "huggingface is down" in resp.json()["detail"]
    assert client.get(f"/chats/{chat_id}").json()["history"] == []


def test_info_endpoints(client):
    assert client.get("/").json()["name"] == "LLM Server API"
    hello = client.get("/hello").json()
    assert hello["status"] == "success"
    assert hello["timestamp"]
    assert client.get("/health").json() == {"status": "ok"}
