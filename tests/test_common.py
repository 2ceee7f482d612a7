from __future__ import annotations

import threading

import pytest

from dotbuild import paths
from dotbuild.diagnostics import Diagnostic, DiagnosticBag, Severity
from dotbuild.errors import BuildError, ParseError, UnterminatedString
from dotbuild.model import BuildGraph, ModuleDescriptor, ModuleType


# ---------------------------------------------------------------------
# paths
# ---------------------------------------------------------------------

@pytest.mark.parametrize(
    "path, name, directory",
    [
        ("Engine/Core/Core.build", "Core", "Engine/Core"),
        ("Engine\\Core\\Core.BUILD", "Core", "Engine/Core"),
        ("Core.build", "Core", "."),
        ("/Core.build", "Core", "."),
        ("dir/README", "README", "dir"),
    ],
)
def test_module_name_and_directory(path, name, directory):
    assert paths.module_name(path) == name
    assert paths.module_directory(path) == directory


def test_combine():
    assert paths.combine("root", "Intermediate") == "root/Intermediate"
    assert paths.combine("root/", "Binaries") == "root/Binaries"
    assert paths.combine("C:\\proj", "out") == "C:/proj/out"
    assert paths.combine("", "x") == "x"
    assert paths.combine("x", "") == "x"


# ---------------------------------------------------------------------
# diagnostics / errors
# ---------------------------------------------------------------------

def test_diagnostic_formatting():
    assert str(Diagnostic(Severity.INFO, "Loaded 3 modules")) == "[Info] Loaded 3 modules"
    assert str(Diagnostic(Severity.ERROR, "boom", "A.build", 2, 5)) == "A.build(2,5): [Error] boom"
    assert str(Diagnostic(Severity.WARNING, "dup", "A.build")) == "A.build: [Warning] dup"


def test_bag_collects_from_many_threads():
    bag = DiagnosticBag()

    def worker(i):
        for j in range(100):
            bag.warning(f"{i}-{j}")

    threads = [threading.Thread(target=worker, args=(i,)) for i in range(8)]
    for t in threads:
        t.start()
    for t in threads:
        t.join()

    assert len(bag) == 800
    assert not bag.has_errors
    assert {d.message for d in bag.all()} == {f"{i}-{j}" for i in range(8) for j in range(100)}

    bag.error("bad")
    assert bag.has_errors
    assert [d.message for d in bag.errors()] == ["bad"]

    bag.clear()
    assert bag.all() == []


def test_report_keeps_error_position():
    bag = DiagnosticBag()
    bag.report(ParseError(message="Expected Equals, got Comma", line=3, column=9).with_path("M.build"))
    [d] = bag.all()
    assert (d.severity, d.path, d.line, d.column) == (Severity.ERROR, "M.build", 3, 9)


def test_build_error_str():
    assert str(BuildError("plain")) == "plain"
    assert str(UnterminatedString(line=1, column=4)) == "1:4: Unterminated string"
    assert str(UnterminatedString(line=1, column=4).with_path("x.build")) == "x.build(1,4): Unterminated string"


# ---------------------------------------------------------------------
# model
# ---------------------------------------------------------------------

def test_build_graph_is_read_only():
    core = ModuleDescriptor(name="Core", directory=".")
    graph = BuildGraph({"Core": core})
    assert graph.get("Core") is core
    assert graph.get("Nope") is None
    assert "Core" in graph
    assert list(graph) == [core]
    with pytest.raises(TypeError):
        graph.modules["Other"] = core


def test_build_graph_from_modules_rejects_duplicates():
    m = ModuleDescriptor(name="A", directory=".")
    with pytest.raises(ValueError):
        BuildGraph.from_modules([m, m])


def test_module_type_parse():
    assert ModuleType.parse(None) is ModuleType.STATIC_LIBRARY
    assert ModuleType.parse("EXECUTABLE") is ModuleType.EXECUTABLE
    assert str(ModuleType.SHARED_LIBRARY) == "SharedLibrary"
