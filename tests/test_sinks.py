"""Tests for output sinks."""

from clientgen.sinks import FileSink, MemorySink, StdoutSink


class TestSinks:

    def test_file_sink_creates_parents(self, tmp_path):
        path = tmp_path / "out" / "client.ts"
        FileSink(path).write("export class A {\n}\n")
        assert path.read_text(encoding="utf-8") == "export class A {\n}\n"

    def test_stdout_sink(self, capsys):
        StdoutSink().write("export class A {\n}\n")
        assert capsys.readouterr().out == "export class A {\n}\n"

    def test_memory_sink_keeps_last(self):
        sink = MemorySink()
        assert sink.text is None
        sink.write("a")
        sink.write("b")
        assert sink.text == "b"
