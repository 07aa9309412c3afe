from exprtree.result import Error, Result
from exprtree.serializer import Serializer
from exprtree.tree import Tree


def _tree(text):
    tree = Tree()
    assert tree.checked_enter(text).is_success()
    return tree


def test_successful_tree_writes_prefix_line(tmp_path):
    path = tmp_path / "out.txt"
    tree = _tree("+ 1 2")
    Serializer(path).save(Result.ok(tree))
    assert path.read_text(encoding="utf-8") == tree.prefix() + "\n"


def test_errors_written_one_per_line(tmp_path):
    path = tmp_path / "out.txt"
    errors = [Error("first"), Error("second")]
    Serializer(path).save(Result.fail(errors))
    assert path.read_text(encoding="utf-8").splitlines() == ["first", "second"]


def test_successful_plain_value_writes_nothing(tmp_path):
    path = tmp_path / "out.txt"
    Serializer(path).save(Result.ok(3.0))
    assert path.read_text(encoding="utf-8") == ""


def test_first_save_truncates_existing_file(tmp_path):
    path = tmp_path / "out.txt"
    path.write_text("old contents\n", encoding="utf-8")
    Serializer(path).save(Result.fail(Error("fresh")))
    assert path.read_text(encoding="utf-8") == "fresh\n"


def test_later_saves_append(tmp_path):
    path = tmp_path / "out.txt"
    serializer = Serializer(path)
    serializer.save(Result.fail(Error("one")))
    serializer.save(Result.ok(1.0))
    serializer.save(Result.fail(Error("two")))
    assert path.read_text(encoding="utf-8").splitlines() == ["one", "two"]


def test_new_serializer_starts_over(tmp_path):
    path = tmp_path / "out.txt"
    Serializer(path).save(Result.fail(Error("one")))
    Serializer(path).save(Result.fail(Error("two")))
    assert path.read_text(encoding="utf-8").splitlines() == ["two"]


def test_default_error_message_written(tmp_path):
    path = tmp_path / "out.txt"
    Serializer(path).save(Result.fail(Error()))
    assert path.read_text(encoding="utf-8") == "DEFAULT ERROR\n"