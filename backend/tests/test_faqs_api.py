from __future__ import annotations


def _create(client, question="How do I pair my device?", answer="Hold the button for five seconds.", **extra):
    return client.post("/faqs", json={"question": question, "answer": answer, **extra})


def test_published_and_hidden_lists(client):
    published = _create(client, is_published=True).json()
    hidden = _create(client, question="Is there a night mode?").json()

    assert [f["id"] for f in client.get("/faqs").json()] == [published["id"]]
    assert [f["id"] for f in client.get("/faqs/hidden").json()] == [hidden["id"]]


def test_answer_is_escaped(client):
    response = _create(client, answer="Use the <b>main</b> button & wait.")

    assert response.status_code == 201
    assert response.json()["answer"] == "Use the &lt;b&gt;main&lt;/b&gt; button &amp; wait."


def test_validation_rejects_short_question(client):
    response = _create(client, question="Short?")

    assert response.status_code == 422


def test_show_update_delete(client):
    faq = _create(client).json()

    assert client.get(f"/faqs/{faq['id']}").status_code == 200

    updated = client.put(f"/faqs/{faq['id']}", json={"is_published": True})
    assert updated.status_code == 200
    assert updated.json()["is_published"] is True
    assert updated.json()["question"] == faq["question"]

    assert client.delete(f"/faqs/{faq['id']}").status_code == 204
    missing = client.get(f"/faqs/{faq['id']}")
    assert missing.status_code == 404
    assert missing.json()["detail"] == "FAQ not found"


def test_update_and_delete_missing(client):
    assert client.put("/faqs/999", json={"is_published": True}).status_code == 404
    assert client.delete("/faqs/999").status_code == 404


def test_camel_case_published_flag_is_accepted(client):
    faq = _create(client, isPublished=True).json()

    assert faq["is_published"] is True
    assert [f["id"] for f in client.get("/faqs").json()] == [faq["id"]]

    hidden = client.put(f"/faqs/{faq['id']}", json={"isPublished": False})
    assert hidden.json()["is_published"] is False
