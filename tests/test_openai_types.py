from dummyagent.openai_types import (
    Choice,
    FunctionCall,
    FunctionDefinition,
    Message,
    Request,
    Response,
    Tool,
    ToolCall,
    Usage,
)


def test_message_omits_empty_fields():
    assert Message(role="user", content="hello").to_dict() == {
        "role": "user",
        "content": "hello",
    }
    assert Message(role="assistant").to_dict() == {"role": "assistant"}


def test_tool_message_carries_id_and_name():
    data = Message(role="tool", content="OK", tool_call_id="call_1", name="edit_file").to_dict()
    assert data["tool_call_id"] == "call_1"
    assert data["name"] == "edit_file"


def test_message_round_trip_with_tool_calls():
    original = Message(
        role="assistant",
        content="working",
        tool_calls=[
            ToolCall(
                id="call_1",
                type="function",
                function=FunctionCall(name="read_file", arguments='{"path": "a.txt"}'),
            )
        ],
    )
    assert Message.from_dict(original.to_dict()) == original


def test_tool_call_round_trip():
    call = ToolCall(id="x", type="function", function=FunctionCall(name="list_files", arguments="{}"))
    assert ToolCall.from_dict(call.to_dict()) == call
    assert FunctionCall.from_dict(call.function.to_dict()) == call.function


def test_message_from_dict_treats_null_content_as_empty():
    message = Message.from_dict({"role": "assistant", "content": None, "tool_calls": None})
    assert message.content == ""
    assert message.tool_calls == []


def test_request_omits_defaults():
    assert Request(model="m", messages=[]).to_dict() == {"model": "m", "messages": []}


def test_request_includes_set_options():
    tool = Tool(
        type="function",
        function=FunctionDefinition(name="read_file", parameters={"type": "object"}),
    )
    data = Request(
        model="m",
        messages=[Message(role="user", content="hi")],
        tools=[tool],
        tool_choice="auto",
        max_tokens=2048,
        temperature=0.7,
    ).to_dict()
    assert data["tool_choice"] == "auto"
    assert data["max_tokens"] == 2048
    assert data["temperature"] == 0.7
    assert data["messages"] == [{"role": "user", "content": "hi"}]
    assert data["tools"] == [tool.to_dict()]


def test_function_definition_always_has_parameters():
    assert FunctionDefinition(name="f").to_dict() == {"name": "f", "parameters": None}
    described = FunctionDefinition(name="f", description="does f", parameters={}).to_dict()
    assert described["description"] == "does f"


def test_response_from_dict():
    response = Response.from_dict(
        {
            "id": "resp-1",
            "object": "chat.completion",
            "created": 1700000000,
            "model": "m",
            "choices": [
                {
                    "index": 0,
                    "message": {"role": "assistant", "content": "hi there"},
                    "finish_reason": "stop",
                }
            ],
            "usage": {"prompt_tokens": 3, "completion_tokens": 2, "total_tokens": 5},
        }
    )
    assert response.id == "resp-1"
    assert response.created == 1700000000
    assert response.choices[0].message == Message(role="assistant", content="hi there")
    assert response.choices[0].finish_reason == "stop"
    assert response.usage == Usage(prompt_tokens=3, completion_tokens=2, total_tokens=5)


def test_missing_fields_take_zero_values():
    assert Usage.from_dict({}) == Usage(0, 0, 0)
    assert Choice.from_dict(None) == Choice()
    assert Response.from_dict({}).choices == []