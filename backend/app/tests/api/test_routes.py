import json

VALID_IDEA = {
    "idea": "A fitness tracking app for busy professionals",
    "stage": "Aperture",
    "prdContext": "Test context",
}


def test_health_reports_status(client):
    response = client.get("/health")

    assert response.status_code == 200
    body = response.json()
    assert body["status"] == "healthy"
    assert body["environment"] == "test"
    assert body["version"] == "1.0.0"
    assert "timestamp" in body


def test_submit_idea_returns_workflow_envelope(client, fake_llm):
    response = client.post("/api/idea/submit", json=VALID_IDEA)

    assert response.status_code == 200
    body = response.json()
    assert body["success"] is True
    assert set(body["data"]) == {"userStories", "prd", "architecture", "devTasks"}
    assert body["data"]["devTasks"] == "Mocked AI response 4"
    assert len(fake_llm.calls) == 4


def test_submit_idea_defaults_stage_to_aperture(client, fake_llm):
    response = client.post("/api/idea/submit", json={"idea": VALID_IDEA["idea"]})

    assert response.status_code == 200
    assert "Aperture phase" in fake_llm.calls[0]["user_prompt"]


def test_submit_idea_rejects_empty_idea_and_unknown_stage(client, fake_llm):
    response = client.post("/api/idea/submit", json={"idea": "", "stage": "InvalidStage"})

    assert response.status_code == 400
    body = response.json()
    assert body["success"] is False
    assert body["error"] == "Validation Error"
    assert {tuple(d["loc"])[-1] for d in body["details"]} == {"idea", "stage"}
    assert fake_llm.calls == []


def test_submit_idea_rejects_idea_that_is_too_long(client):
    response = client.post("/api/idea/submit", json={"idea": "A" * 2001, "stage": "Aperture"})

    assert response.status_code == 400
    assert response.json()["success"] is False


def test_submit_idea_accepts_idea_at_max_length(client):
    response = client.post("/api/idea/submit", json={"idea": "A" * 2000})

    assert response.status_code == 200


def test_submit_idea_rejects_oversized_prd_context(client):
    response = client.post("/api/idea/submit", json={**VALID_IDEA, "prdContext": "x" * 5001})

    assert response.status_code == 400


def test_workflow_failure_discards_partial_results(make_client, make_llm):
    llm = make_llm(fail_on_call=2)
    client = make_client(llm=llm)

    response = client.post("/api/idea/submit", json=VALID_IDEA)

    assert response.status_code == 500
    body = response.json()
    assert body == {"success": False, "error": "Idea workflow failed"}
    assert len(llm.calls) == 2


def test_workflow_failure_exposes_message_in_development(make_client, make_llm):
    client = make_client(llm=make_llm(fail_on_call=1), ENVIRONMENT="development")

    response = client.post("/api/idea/submit", json=VALID_IDEA)

    assert response.status_code == 500
    assert "Business Analyst" in response.json()["message"]


def test_stream_endpoint_validates_before_streaming(client, fake_llm):
    response = client.post("/api/idea/submit/stream", json={"idea": "short"})

    assert response.status_code == 400
    assert fake_llm.calls == []


def _sse_events(text: str) -> list[dict]:
    return [json.loads(line[len("data:"):]) for line in text.splitlines() if line.startswith("data:")]


def test_stream_endpoint_emits_workflow_events(client, fake_llm):
    response = client.post("/api/idea/submit/stream", json=VALID_IDEA)

    assert response.status_code == 200
    assert response.headers["content-type"].startswith("text/event-stream")
    events = _sse_events(response.text)
    assert [e["status"] for e in events] == [
        "starting",
        *["step_started", "step_completed"] * 4,
        "completed",
    ]
    assert events[-1]["data"] == {
        "userStories": "Mocked AI response 1",
        "prd": "Mocked AI response 2",
        "architecture": "Mocked AI response 3",
        "devTasks": "Mocked AI response 4",
    }
    assert len(fake_llm.calls) == 4


def test_stream_endpoint_reports_single_error_event(make_client, make_llm):
    client = make_client(llm=make_llm(fail_on_call=2))

    response = client.post("/api/idea/submit/stream", json=VALID_IDEA)

    assert response.status_code == 200
    statuses = [e["status"] for e in _sse_events(response.text)]
    assert statuses == ["starting", "step_started", "step_completed", "step_started", "error"]


def test_chat_returns_response(client, fake_llm):
    response = client.post(
        "/api/chat",
        json={
            "message": "Hello, can you help me with product discovery?",
            "stage": "Aperture",
            "prdContext": "Test context",
            "conversationHistory": [{"role": "user", "content": "Hi"}],
        },
    )

    assert response.status_code == 200
    assert response.json() == {"success": True, "data": {"response": "Mocked AI response 1"}}
    assert "user: Hi" in fake_llm.calls[0]["user_prompt"]


def test_chat_rejects_empty_and_long_messages(client):
    assert client.post("/api/chat", json={"message": "", "stage": "Aperture"}).status_code == 400
    assert client.post("/api/chat", json={"message": "m" * 1001}).status_code == 400


def test_chat_provider_failure_is_500(make_client, make_llm):
    client = make_client(llm=make_llm(fail_on_call=1))

    response = client.post("/api/chat", json={"message": "Hello"})

    assert response.status_code == 500
    assert response.json() == {"success": False, "error": "Agent request failed"}


def test_summarize_section(client, fake_llm):
    response = client.post(
        "/api/prd/summarize",
        json={
            "section": "problemStatement",
            "content": "Users struggle to track their fitness goals",
            "stage": "Discovery",
        },
    )

    assert response.status_code == 200
    assert response.json()["data"] == {"summary": "Mocked AI response 1"}
    assert "problem statement" in fake_llm.calls[0]["user_prompt"]


def test_summarize_section_accepts_list_content(client):
    response = client.post(
        "/api/prd/summarize",
        json={"section": "tradeOffs", "content": ["Speed vs quality", "Build vs buy"]},
    )

    assert response.status_code == 200


def test_summarize_section_rejects_missing_or_empty_content(client):
    assert client.post("/api/prd/summarize", json={"section": "learnings"}).status_code == 400
    assert client.post("/api/prd/summarize", json={"section": "learnings", "content": ""}).status_code == 400
    assert client.post("/api/prd/summarize", json={"section": "learnings", "content": "   "}).status_code == 400
    assert client.post("/api/prd/summarize", json={"section": "learnings", "content": [" "]}).status_code == 400
    assert client.post("/api/prd/summarize", json={"section": "", "content": "x"}).status_code == 400


def test_update_section_records_snapshot(client, fake_llm):
    response = client.post("/api/prd/sections/problemStatement", json={"content": "Users skip workouts"})

    assert response.status_code == 200
    data = response.json()["data"]
    assert data["prd"]["sections"]["problemStatement"] == "Users skip workouts"
    versions = data["history"]["problemStatement"]
    assert [v["content"] for v in versions] == ["Users skip workouts"]
    assert versions[0]["id"].startswith("problemStatement-")
    assert data["history"]["tradeOffs"] == []
    assert fake_llm.calls == []


def test_update_section_keeps_newest_five_snapshots(client):
    state = {}
    for i in range(7):
        response = client.post("/api/prd/sections/tradeOffs", json={**state, "content": [f"option {i}"]})
        state = response.json()["data"]

    assert state["prd"]["sections"]["tradeOffs"] == ["option 6"]
    assert [v["content"] for v in state["history"]["tradeOffs"]] == [
        ["option 6"],
        ["option 5"],
        ["option 4"],
        ["option 3"],
        ["option 2"],
    ]


def test_update_unversioned_section_has_no_history(client):
    response = client.post("/api/prd/sections/userFeedback", json={"content": "Love it"})

    data = response.json()["data"]
    assert data["prd"]["sections"]["userFeedback"] == "Love it"
    assert "userFeedback" not in data["history"]


def test_update_section_rejects_bad_section_or_content(client):
    assert client.post("/api/prd/sections/budget", json={"content": "x"}).status_code == 400
    assert client.post("/api/prd/sections/learnings", json={}).status_code == 400
    bad_history = {"content": "x", "history": {"budget": []}}
    assert client.post("/api/prd/sections/learnings", json=bad_history).status_code == 400

    response = client.post("/api/prd/sections/tradeOffs", json={"content": "not a list"})

    assert response.status_code == 400
    assert response.json()["error"] == "Validation Error"


def test_restore_section_brings_back_snapshot(client):
    first = client.post("/api/prd/sections/problemStatement", json={"content": "First draft"}).json()["data"]
    second = client.post(
        "/api/prd/sections/problemStatement", json={**first, "content": "Second draft"}
    ).json()["data"]
    oldest = second["history"]["problemStatement"][-1]

    response = client.post(
        "/api/prd/sections/problemStatement/restore", json={**second, "versionId": oldest["id"]}
    )

    assert response.status_code == 200
    data = response.json()["data"]
    assert data["restored"] is True
    assert data["prd"]["sections"]["problemStatement"] == "First draft"
    assert len(data["history"]["problemStatement"]) == 2


def test_restore_unknown_version_leaves_prd_unchanged(client):
    state = client.post("/api/prd/sections/learnings", json={"content": "Users want reminders"}).json()["data"]

    response = client.post("/api/prd/sections/learnings/restore", json={**state, "versionId": "missing-id"})

    data = response.json()["data"]
    assert data["restored"] is False
    assert data["prd"]["sections"]["learnings"] == "Users want reminders"
    assert len(data["history"]["learnings"]) == 1


def test_restore_rejects_unversioned_section_and_missing_id(client):
    assert client.post("/api/prd/sections/userFeedback/restore", json={"versionId": "x"}).status_code == 400
    assert client.post("/api/prd/sections/learnings/restore", json={}).status_code == 400


def test_agents_summarize(client, fake_llm):
    response = client.post(
        "/api/agents/summarize",
        json={
            "agentResponses": [
                {"name": "Alex", "role": "Business Analyst", "confidence": 85, "response": "Focus on onboarding."},
                {"name": "Sam", "role": "Solution Architect", "response": "Keep the stack simple."},
            ]
        },
    )

    assert response.status_code == 200
    assert response.json() == {"success": True, "data": {"summary": "Mocked AI response 1"}}
    assert "Alex (Business Analyst) [Confidence: 85%]" in fake_llm.calls[0]["user_prompt"]


def test_agents_summarize_requires_responses(client):
    for body in ({}, {"agentResponses": []}, {"agentResponses": "nope"}):
        response = client.post("/api/agents/summarize", json=body)
        assert response.status_code == 400
        assert response.json()["success"] is False


def test_recommendation_advances_well_defined_aperture(client, fake_llm):
    prd = {
        "title": "FitTrack for professionals",
        "stage": "Aperture",
        "sections": {
            "problemStatement": (
                "Busy professionals skip workouts. They lack time to plan sessions. "
                "Existing apps assume long free evenings."
            ),
            "learnings": "Interviews show commute time is the only reliable slot. Users want five minute plans. Reminders help.",
        },
    }

    response = client.post("/api/prd/recommendation", json={"prd": prd})

    assert response.status_code == 200
    data = response.json()["data"]
    assert data == {
        "recommendedStage": "Discovery",
        "reason": data["reason"],
        "confidence": "high",
        "action": "advance",
    }
    assert fake_llm.calls == []


def test_recommendation_defaults_empty_prd_to_review(client):
    response = client.post("/api/prd/recommendation", json={"prd": {}})

    assert response.status_code == 200
    assert response.json()["data"]["action"] == "review"


def test_stage_requirements(client):
    response = client.get("/api/prd/stages/Live/requirements")

    assert response.status_code == 200
    assert response.json()["data"] == {
        "stage": "Live",
        "requirements": ["Post-launch metrics", "User feedback", "Results analysis"],
    }


def test_stage_requirements_rejects_unknown_stage(client):
    assert client.get("/api/prd/stages/Launch/requirements").status_code == 400


def test_unknown_route_uses_error_envelope(client):
    response = client.get("/api/nope")

    assert response.status_code == 404
    assert response.json()["success"] is False
