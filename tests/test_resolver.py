from api_term.parser.base import Endpoint, Param
from api_term.request.resolver import parse_headers, resolve_inputs


def _endpoint(*params: Param) -> Endpoint:
    return Endpoint(method="GET", path="/things", parameters=params)


PATH_ID = Param(name="id", location="path", required=True)
QUERY_Q = Param(name="q", location="query", required=True)
OPTIONAL_LIMIT = Param(name="limit", location="query", required=False)


class TestShorthand:
    def test_binds_single_required_path_param(self):
        ep = _endpoint(PATH_ID, OPTIONAL_LIMIT)
        assert resolve_inputs(ep, "42", {}) == {"id": "42"}

    def test_binds_single_required_query_param(self):
        ep = _endpoint(QUERY_Q, OPTIONAL_LIMIT)
        assert resolve_inputs(ep, "42", {}) == {"q": "42"}

    def test_ambiguous_path_and_query_binds_nothing(self):
        ep = _endpoint(PATH_ID, QUERY_Q)
        assert resolve_inputs(ep, "42", {"api_key": "k"}) == {"api_key": "k"}

    def test_two_required_path_params_bind_nothing(self):
        ep = _endpoint(PATH_ID, Param(name="sub", location="path", required=True))
        assert resolve_inputs(ep, "42", {}) == {}

    def test_no_required_params_binds_nothing(self):
        assert resolve_inputs(_endpoint(OPTIONAL_LIMIT), "42", {}) == {}

    def test_shorthand_overrides_global(self):
        ep = _endpoint(QUERY_Q)
        assert resolve_inputs(ep, "new", {"q": "old"}) == {"q": "new"}


class TestKeyValuePairs:
    def test_pairs_override_globals(self):
        ep = _endpoint(OPTIONAL_LIMIT)
        result = resolve_inputs(ep, "a=1&b=2", {"a": "global", "c": "3"})
        assert result == {"a": "1", "b": "2", "c": "3"}

    def test_split_on_first_equals_only(self):
        assert resolve_inputs(_endpoint(), "filter=a=b", {}) == {"filter": "a=b"}

    def test_pair_without_equals_is_dropped(self):
        assert resolve_inputs(_endpoint(PATH_ID), "a=1&orphan", {}) == {"a": "1"}

    def test_ampersand_alone_disables_shorthand(self):
        assert resolve_inputs(_endpoint(PATH_ID), "42&", {}) == {}

    def test_keys_are_not_trimmed(self):
        assert resolve_inputs(_endpoint(), " a =1", {}) == {" a ": "1"}

    def test_empty_text_yields_globals_only(self):
        assert resolve_inputs(_endpoint(PATH_ID), "", {"g": "1"}) == {"g": "1"}

    def test_globals_are_not_mutated(self):
        globals_ = {"a": "1"}
        resolve_inputs(_endpoint(), "a=2", globals_)
        assert globals_ == {"a": "1"}


class TestParseHeaders:
    def test_mixed_delimiters(self):
        assert parse_headers("X-Id:7;X-Trace=abc") == {"X-Id": "7", "X-Trace": "abc"}

    def test_colon_wins_over_equals(self):
        assert parse_headers("Authorization: Bearer a=b") == {"Authorization": "Bearer a=b"}

    def test_tokens_are_trimmed(self):
        assert parse_headers("  Accept : application/json  &  X-A = 1 ") == {
            "Accept": "application/json",
            "X-A": "1",
        }

    def test_invalid_tokens_are_dropped(self):
        assert parse_headers("garbage; :novalue; =x;;X-Ok:1") == {"X-Ok": "1"}

    def test_later_tokens_overwrite(self):
        assert parse_headers("X-A:1&X-A:2") == {"X-A": "2"}

    def test_empty_text(self):
        assert parse_headers("") == {}
