"""
Builder の解決と派生演算子のテスト
"""
from __future__ import annotations

import itertools

import pytest

from mockbuilder import Builder, literal


class TestResolution:
    def test_literal_shape_builds_identical_objects(self):
        builder = Builder({"id": 1, "name": "foo"})
        first = builder.build()
        second = builder.build()
        assert first == {"id": 1, "name": "foo"}
        assert first == second
        # 解決結果は毎回新しい dict
        assert first is not second

    def test_thunks_are_invoked_per_build(self):
        counter = itertools.count(1)
        builder = Builder({"id": lambda: next(counter), "name": lambda: "foo"})
        first = builder.build()
        second = builder.build()
        assert first == {"id": 1, "name": "foo"}
        assert second == {"id": 2, "name": "foo"}

    def test_empty_shape_builds_empty_dict(self):
        assert Builder().build() == {}
        assert Builder({}).build() == {}

    def test_generate_is_alias_of_build(self):
        builder = Builder({"id": 1})
        assert builder.generate() == builder.build()
        assert builder.generate(2) == [{"id": 1}, {"id": 1}]

    def test_constructor_copies_shape(self):
        shape = {"id": 1}
        builder = Builder(shape)
        shape["id"] = 2
        shape["extra"] = True
        assert builder.build() == {"id": 1}

    def test_literal_wrapper_keeps_callable_value(self):
        def callback():
            return "called"

        out = Builder({"on_click": literal(callback), "label": "ok"}).build()
        assert out["on_click"] is callback

    def test_thunk_errors_propagate(self):
        def boom():
            raise RuntimeError("boom")

        with pytest.raises(RuntimeError, match="boom"):
            Builder({"x": boom}).build()

    def test_non_mapping_shape_is_rejected(self):
        with pytest.raises(TypeError):
            Builder([("id", 1)])  # type: ignore[arg-type]


class TestWithValue:
    def test_overrides_and_leaves_original_untouched(self, user_shape):
        base = Builder(user_shape)
        admin = base.with_value("is_admin", True)
        assert admin.build() == {"name": "Default", "age": 25, "is_admin": True}
        assert base.build() == user_shape

    def test_overrides_thunk_binding(self):
        base = Builder({"id": lambda: 99})
        assert base.with_value("id", 7).build() == {"id": 7}

    def test_callable_value_is_bound_as_literal(self):
        fn = lambda: "nope"  # noqa: E731
        out = Builder({"x": 1}).with_value("x", fn).build()
        assert out["x"] is fn

    def test_branching_from_a_common_ancestor(self, user_shape):
        base = Builder(user_shape)
        a = base.with_value("name", "A")
        b = base.with_value("name", "B")
        assert a.build()["name"] == "A"
        assert b.build()["name"] == "B"
        assert base.build()["name"] == "Default"

    def test_can_add_new_key(self):
        out = Builder({"id": 1}).with_value("tag", "x").build()
        assert out == {"id": 1, "tag": "x"}


class TestConditionalValue:
    @pytest.mark.parametrize("cond, expected", [(True, "yes"), (False, "no")])
    def test_picks_branch(self, cond, expected):
        out = Builder({"answer": "?"}).set_conditional_value("answer", cond, "yes", "no").build()
        assert out["answer"] == expected

    def test_condition_is_evaluated_at_call_time(self):
        flag = {"on": True}
        b = Builder({}).set_conditional_value("v", flag["on"], 1, 0)
        flag["on"] = False
        assert b.build() == {"v": 1}


class TestApplyDefaultValues:
    def test_existing_keys_win(self, user_shape):
        out = Builder(user_shape).apply_default_values({"age": 99, "email": "a@example.com"}).build()
        assert out == {"name": "Default", "age": 25, "is_admin": False, "email": "a@example.com"}

    def test_default_thunks_run_at_resolution_time(self):
        calls = []

        def make():
            calls.append(1)
            return "x"

        b = Builder().apply_default_values({"x": make})
        assert calls == []
        assert b.build(3) == [{"x": "x"}] * 3
        assert len(calls) == 3

    def test_receiver_is_not_changed(self):
        base = Builder({"id": 1})
        base.apply_default_values({"name": "n"})
        assert list(base.shape) == ["id"]

    def test_rejects_non_mapping(self):
        with pytest.raises(TypeError):
            Builder().apply_default_values(["x"])  # type: ignore[arg-type]


class TestMapValue:
    def test_maps_literal(self):
        out = Builder({"name": "foo"}).map_value("name", str.upper).build()
        assert out == {"name": "FOO"}

    def test_maps_fresh_thunk_value_each_instance(self):
        counter = itertools.count(1)
        b = Builder({"n": lambda: next(counter)}).map_value("n", lambda v: v * 10)
        assert b.build(3) == [{"n": 10}, {"n": 20}, {"n": 30}]

    def test_composes_in_call_order(self):
        b = Builder({"n": 2}).map_value("n", lambda v: v + 3).map_value("n", lambda v: v * 10)
        assert b.build() == {"n": 50}

    def test_after_with_value(self):
        b = Builder({"n": 1}).with_value("n", 4).map_value("n", lambda v: v ** 2)
        assert b.build() == {"n": 16}

    def test_original_unchanged(self):
        base = Builder({"n": 1})
        base.map_value("n", lambda v: v + 1)
        assert base.build() == {"n": 1}

    def test_unknown_key_raises(self):
        with pytest.raises(KeyError):
            Builder({"n": 1}).map_value("missing", lambda v: v)


class TestIntrospection:
    def test_shape_view_is_read_only(self):
        b = Builder({"id": 1})
        with pytest.raises(TypeError):
            b.shape["id"] = 2  # type: ignore[index]
        assert dict(b.shape) == {"id": 1}

    def test_contains_and_shape_listing(self, user_shape):
        b = Builder(user_shape)
        assert len(b.shape) == 3
        assert "age" in b and "email" not in b
        assert list(b.shape) == ["name", "age", "is_admin"]
        assert repr(b) == "Builder(fields=[name, age, is_admin])"

    def test_empty_builder_is_truthy(self):
        fallback = Builder({"id": 1})
        assert bool(Builder()) is True
        assert (Builder() or fallback).build() == {}

    def test_builder_is_not_a_mapping(self):
        # フィールドの取り出しは shape ビュー経由
        b = Builder({"a": 1})
        assert dict(b.shape) == {"a": 1}
        assert {**b.shape} == {"a": 1}
        with pytest.raises(TypeError):
            dict(b)  # type: ignore[call-overload]

    def test_subclass_survives_derivation(self):
        class UserBuilder(Builder):
            def admin(self):
                return self.with_value("is_admin", True)

        b = UserBuilder({"is_admin": False}).with_value("name", "x")
        assert isinstance(b, UserBuilder)
        assert b.admin().build() == {"is_admin": True, "name": "x"}
