from converter.utils.json_transform import transform_value


def test_identity_preserves_structure():
    tree = {"a": "x", "b": ["y", {"c": "z"}], "n": 5}
    assert transform_value(tree, lambda s: s) == tree


def test_uppercase_transforms_only_string_leaves():
    tree = {"a": "x", "b": ["y", {"c": "z"}], "n": 5}
    assert transform_value(tree, str.upper) == {"a": "X", "b": ["Y", {"c": "Z"}], "n": 5}


def test_keys_and_key_order_are_kept():
    tree = {"zeta": "a", "alpha": "b", "中": "c"}
    result = transform_value(tree, lambda s: s * 2)
    assert list(result.keys()) == ["zeta", "alpha", "中"]
    assert result == {"zeta": "aa", "alpha": "bb", "中": "cc"}


def test_scalars_are_untouched():
    calls = []

    def transform(s):
        calls.append(s)
        return s

    tree = [1, 2.5, True, False, None, {"k": None}]
    assert transform_value(tree, transform) == tree
    assert calls == []


def test_top_level_string_and_scalar():
    assert transform_value("abc", str.upper) == "ABC"
    assert transform_value(42, str.upper) == 42
    assert transform_value(None, str.upper) is None


def test_input_is_not_mutated():
    tree = {"list": ["a", "b"], "obj": {"k": "v"}}
    transform_value(tree, str.upper)
    assert tree == {"list": ["a", "b"], "obj": {"k": "v"}}


def test_list_order_is_kept():
    tree = ["a", ["b", "c"], "d", {"e": ["f"]}, "g"]
    assert transform_value(tree, str.upper) == ["A", ["B", "C"], "D", {"e": ["F"]}, "G"]


def test_transform_called_once_per_leaf():
    calls = []

    def transform(s):
        calls.append(s)
        return s.upper()

    transform_value({"a": ["x", "y"], "b": {"c": "z"}}, transform)
    assert sorted(calls) == ["x", "y", "z"]


def test_deep_nesting_does_not_hit_recursion_limit():
    depth = 50000
    tree = "leaf"
    for _ in range(depth):
        tree = [tree]

    result = transform_value(tree, str.upper)
    for _ in range(depth):
        assert isinstance(result, list) and len(result) == 1
        result = result[0]
    assert result == "LEAF"
