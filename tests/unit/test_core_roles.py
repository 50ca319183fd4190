import pytest

from authprovider.core import roles
from authprovider.core.exceptions import InvalidInputError, MalformedClaimError


def test_validate_roles_accepts_any_iterable_of_strings():
    assert roles.validate_roles(["admin", "admin"]) == ("admin", "admin")
    assert roles.validate_roles(role for role in ("a", "b")) == ("a", "b")
    assert roles.validate_roles(()) == ()


@pytest.mark.parametrize("value", ["admin", b"admin", 42, None, ["admin", 7], ["admin", None], [b"admin"]])
def test_validate_roles_rejects_non_string_input(value):
    with pytest.raises(InvalidInputError):
        roles.validate_roles(value)


def test_dedupe_roles_keeps_first_occurrence():
    assert roles.dedupe_roles(["editor", "admin", "editor", "admin"]) == ("editor", "admin")


def test_dedupe_roles_is_case_sensitive():
    assert roles.dedupe_roles(["Admin", "admin"]) == ("Admin", "admin")


def test_merge_roles_unions_without_duplicates():
    assert roles.merge_roles(["admin"], ["editor", "admin", "editor"]) == ("admin", "editor")


def test_merge_roles_collapses_duplicated_current_claim():
    assert roles.merge_roles(["admin", "admin"], ["admin"]) == ("admin",)


@pytest.mark.parametrize(
    "current,removals,expected",
    [
        (["a", "b"], ["a"], ("b",)),
        (["a", "b"], ["c"], ("a", "b")),
        (["a", "b", "a"], ["a"], ("b",)),
        (["a", "b", "c"], ["a", "a", "c"], ("b",)),
        (["a"], ["a"], ()),
        ([], ["a"], ()),
    ],
)
def test_remove_roles(current, removals, expected):
    assert roles.remove_roles(current, removals) == expected


def test_helpers_do_not_mutate_inputs():
    current = ["a", "b", "a"]
    removals = ["a"]
    roles.remove_roles(current, removals)
    roles.merge_roles(current, removals)
    assert current == ["a", "b", "a"]
    assert removals == ["a"]


def test_decode_role_claim_absent():
    assert roles.decode_role_claim(None) == ((), False)
    assert roles.decode_role_claim({}) == ((), False)
    assert roles.decode_role_claim({"tier": "gold"}) == ((), False)


def test_decode_role_claim_present_and_empty():
    assert roles.decode_role_claim({"role": []}) == ((), True)


def test_decode_role_claim_dedupes():
    assert roles.decode_role_claim({"role": ["admin", "admin", "editor"]}) == (("admin", "editor"), True)


def test_decode_role_claim_custom_key():
    assert roles.decode_role_claim({"groups": ["ops"]}, claim="groups") == (("ops",), True)


@pytest.mark.parametrize("value", ["admin", {"admin": True}, 42, None, ["admin", 1], [["admin"]]])
def test_decode_role_claim_rejects_malformed(value):
    with pytest.raises(MalformedClaimError):
        roles.decode_role_claim({"role": value})


def test_encode_role_claim_preserves_other_keys():
    claims = {"tier": "gold", "role": ["old"]}
    encoded = roles.encode_role_claim(claims, ["admin", "admin"])
    assert encoded == {"tier": "gold", "role": ["admin"]}
    assert claims == {"tier": "gold", "role": ["old"]}


def test_encode_role_claim_empty_set_keeps_key():
    assert roles.encode_role_claim(None, []) == {"role": []}
