"""
도구 조회/호출 HTTP API 테스트 (업스트림은 MockTransport)
"""
from youth_gateway.render.markdown import NO_RESULTS


def test_list_tools(client):
    response = client.get("/api/tools")

    assert response.status_code == 200
    data = response.json()
    assert data["total"] == 29
    first = data["tools"][0]
    assert first["name"] == "search_youth_policies"
    assert first["description"]
    assert first["inputSchema"]["type"] == "object"
    assert "keyword" in first["inputSchema"]["properties"]


def test_call_tool_success(client, fake):
    fake.json("policy", [{"plcyNo": "R1", "plcyNm": "청년 월세 지원"}], total=1)

    response = client.post("/api/tools/search_youth_policies", json={"keyword": "월세", "region": "서울"})

    assert response.status_code == 200
    data = response.json()
    assert data["isError"] is False
    (content,) = data["content"]
    assert content["type"] == "text"
    assert "### 청년 월세 지원" in content["text"]

    (params,) = fake.calls("policy")
    assert params["zipCd"] == "11000"
    assert params["apiKeyNm"] == "policy-key"


def test_call_tool_without_body(client, fake):
    fake.xml("employment_program", [])

    response = client.post("/api/tools/search_employment_programs")

    assert response.status_code == 200
    assert response.json()["content"][0]["text"] == NO_RESULTS


def test_call_tool_upstream_failure_is_flagged(client, fake):
    fake.fail("center", 503)

    response = client.post("/api/tools/search_youth_centers", json={"region": "부산"})

    assert response.status_code == 200
    data = response.json()
    assert data["isError"] is True
    assert data["content"][0]["text"].startswith("오류 발생")


def test_call_tool_invalid_arguments_is_flagged(client, fake):
    response = client.post("/api/tools/recommend_policies_by_age", json={"age": "스물다섯"})

    assert response.status_code == 200
    assert response.json()["isError"] is True
    assert fake.requests == []


def test_call_unknown_tool(client):
    response = client.post("/api/tools/not_a_tool", json={})

    assert response.status_code == 404
    assert response.json()["detail"]["message"] == "Tool not found: not_a_tool"
