from lottiekit.lottie.validator import (
    ValidationError,
    format_validation_errors,
    validate_animation,
    validate_bounds,
    validate_structure,
)


def _transform():
    return {
        "p": {"a": 0, "k": [256, 256]},
        "s": {"a": 0, "k": [100, 100]},
        "r": {"a": 0, "k": 0},
        "o": {"a": 0, "k": 100},
        "a": {"a": 0, "k": [0, 0]},
    }


def _layer(**overrides):
    layer = {"ty": 4, "nm": "Shape Layer", "ind": 0, "ip": 0, "op": 60, "ks": _transform()}
    layer.update(overrides)
    return layer


def _animation(**overrides):
    doc = {"v": "5.5.7", "fr": 30, "ip": 0, "op": 60, "w": 512, "h": 512, "nm": "Test", "layers": []}
    doc.update(overrides)
    return doc


def test_minimal_animation_is_valid():
    result = validate_animation(_animation(layers=[_layer()]))
    assert result.valid
    assert result.errors == []


def test_missing_fields_are_all_reported():
    result = validate_structure({"v": "5.5.7", "fr": 30})
    assert not result.valid
    assert len(result.errors) == 6
    assert {e.keyword for e in result.errors} == {"required"}
    assert all(e.path == "/" for e in result.errors)


def test_wrong_type_path_points_at_field():
    result = validate_structure(_animation(fr="thirty"))
    assert not result.valid
    assert result.errors[0].path == "/fr"
    assert result.errors[0].keyword == "type"


def test_layer_missing_transform_channel():
    layer = _layer()
    del layer["ks"]["a"]
    result = validate_structure(_animation(layers=[layer]))
    assert [e.path for e in result.errors] == ["/layers/0/ks"]


def test_structural_failure_skips_bounds():
    result = validate_animation(_animation(fr=0, ip=30, op=30))
    assert not result.valid
    assert all(e.keyword != "range" for e in result.errors)


def test_equal_in_and_out_point():
    result = validate_bounds(_animation(ip=30, op=30))
    assert not result.valid
    assert result.errors == [ValidationError("/op", "Out-point must be greater than in-point", "range")]


def test_layer_exceeding_duration():
    result = validate_bounds(_animation(op=30, layers=[_layer(op=45)]))
    assert len(result.errors) == 1
    assert result.errors[0].path == "/layers/0/op"


def test_layer_ending_with_animation_is_valid():
    assert validate_bounds(_animation(op=30, layers=[_layer(op=30)])).valid


def test_bounds_collects_every_error():
    result = validate_bounds(_animation(ip=10, op=5, fr=200, w=0, h=0, layers=[_layer(op=6)]))
    assert [e.path for e in result.errors] == ["/op", "/fr", "/w", "/h", "/layers/0/op"]


def test_non_object_document_does_not_raise():
    result = validate_animation(["not", "a", "document"])
    assert not result.valid
    assert result.errors[0].keyword == "type"


def test_format_validation_errors():
    assert format_validation_errors([]) == ""
    text = format_validation_errors([
        ValidationError("/op", "Out-point must be greater than in-point", "range"),
        ValidationError("/fr", "Frame rate must be between 1 and 120", "range"),
    ])
    assert text == "/op: Out-point must be greater than in-point\n/fr: Frame rate must be between 1 and 120"
