import pytest

from statica import ContractViolation, ResponseSink


def test_start_and_write(sink, messages, run):
    async def go():
        await sink.start(200, [(b"content-length", b"2")])
        await sink.write(b"o")
        await sink.write(b"k", more=False)

    run(go())
    assert [m["type"] for m in messages] == [
        "http.response.start",
        "http.response.body",
        "http.response.body",
    ]
    assert messages[-1]["more_body"] is False
    assert sink.closed


def test_start_twice(sink, run):
    async def go():
        await sink.start(200, [])
        await sink.start(200, [])

    with pytest.raises(ContractViolation):
        run(go())


def test_write_before_start(sink, run):
    with pytest.raises(ContractViolation):
        run(sink.write(b"early"))


def test_write_after_close(sink, run):
    async def go():
        await sink.start(200, [])
        await sink.close()
        await sink.write(b"late")

    with pytest.raises(ContractViolation):
        run(go())


def test_head_drops_body(messages, run):
    async def send(message):
        messages.append(message)

    sink = ResponseSink(send, head=True)

    async def go():
        await sink.start(200, [(b"content-length", b"5")])
        await sink.write(b"hello")
        await sink.close()

    run(go())
    assert len(messages) == 2
    assert messages[1]["body"] == b""
