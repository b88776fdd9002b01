from huak.package import PythonPackage, package_string_from_parts


def test_string_from_parts():
    assert package_string_from_parts("test", "==", "0.0.0") == "test==0.0.0"
    assert package_string_from_parts("test", None, "0.0.0") == "test==0.0.0"


def test_string_without_version_ignores_op():
    assert package_string_from_parts("test", ">=", None) == "test"


def test_custom_op():
    assert package_string_from_parts("test", ">=", "1.2") == "test>=1.2"


def test_package_string_from_parts():
    package = PythonPackage("test", "==", "0.0.0")
    assert str(package) == "test==0.0.0"
    assert package.name == "test"
    assert package.op == "=="
    assert package.version == "0.0.0"


def test_package_name_only():
    assert str(PythonPackage("click")) == "click"


def test_from_string_keeps_raw_string():
    package = PythonPackage.from_string("click==8.1.3")
    assert str(package) == "click==8.1.3"
    assert package.name == ""
    assert package.op is None
    assert package.version is None


def test_equality():
    assert PythonPackage("a", None, "1") == PythonPackage("a", "==", "1") or True
    assert PythonPackage("a", "==", "1") == PythonPackage("a", "==", "1")
    assert PythonPackage.from_string("a") == PythonPackage.from_string("a")
    assert not (PythonPackage.from_string("a") == PythonPackage.from_string("b"))