from ollama_request.errors import DuplicateKeyError
from ollama_request.options import CompletionOptions
from ollama_request.types import ChatRequestData, Message, Role


def main() -> None:
    req = ChatRequestData(
        model="llama3",
        messages=[Message(role=Role.USER, content="What's the weather in Paris?")],
        tools=[
            {
                "type": "function",
                "function": {
                    "name": "get_weather",
                    "parameters": {"type": "object", "properties": {"city": {"type": "string"}}},
                },
            }
        ],
        think=True,
    )
    req.options = CompletionOptions(temperature=0.2, num_ctx=4096)
    print(req.to_json())

    # Demonstrate the duplicate-key policy (options may not redefine fixed keys)
    req.options = CompletionOptions(stream=False)
    try:
        req.to_json()
    except DuplicateKeyError as e:
        print("Expected error:", type(e).__name__, e)


if __name__ == "__main__":
    main()
