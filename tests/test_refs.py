import pytest

from oas_normalizer.refs import is_local_ref, maybe_resolve_local_ref, resolve_pointer

DOC = {
    "paths": {"/pets": {"get": {"operationId": "listPets"}}},
    "tags": [{"name": "pets"}, {"name": "store"}],
    "components": {
        "schemas": {
            "Pet": {"type": "object"},
            "Alias": {"$ref": "#/components/schemas/Pet"},
            "a~b": {"type": "string"},
        },
        "requestBodies": {
            "Loop1": {"$ref": "#/components/requestBodies/Loop2"},
            "Loop2": {"$ref": "#/components/requestBodies/Loop1"},
        },
    },
}


class TestIsLocalRef:
    def test_local(self):
        assert is_local_ref({"$ref": "#/components/schemas/Pet"}) is True

    def test_external(self):
        assert is_local_ref({"$ref": "other.yaml#/components/schemas/Pet"}) is False

    def test_not_a_ref(self):
        assert is_local_ref({"type": "object"}) is False
        assert is_local_ref("#/components/schemas/Pet") is False


class TestResolvePointer:
    def test_escaped_slash(self):
        assert resolve_pointer(DOC, "#/paths/~1pets/get") == {"operationId": "listPets"}

    def test_escaped_tilde(self):
        assert resolve_pointer(DOC, "#/components/schemas/a~0b") == {"type": "string"}

    def test_list_index(self):
        assert resolve_pointer(DOC, "#/tags/1/name") == "store"

    def test_root(self):
        assert resolve_pointer(DOC, "#") is DOC

    def test_missing_part(self):
        with pytest.raises(KeyError):
            resolve_pointer(DOC, "#/components/schemas/Missing")


class TestMaybeResolveLocalRef:
    def test_resolves(self):
        assert maybe_resolve_local_ref(DOC, {"$ref": "#/components/schemas/Pet"}) == {"type": "object"}

    def test_follows_chain(self):
        assert maybe_resolve_local_ref(DOC, {"$ref": "#/components/schemas/Alias"}) == {"type": "object"}

    def test_non_ref_unchanged(self):
        value = {"type": "string"}
        assert maybe_resolve_local_ref(DOC, value) is value

    def test_external_ref_unchanged(self):
        value = {"$ref": "https://example.com/pet.yaml"}
        assert maybe_resolve_local_ref(DOC, value) is value

    def test_unresolvable_returns_ref(self):
        value = {"$ref": "#/components/schemas/Missing"}
        assert maybe_resolve_local_ref(DOC, value) is value

    def test_cycle_does_not_loop(self):
        result = maybe_resolve_local_ref(DOC, {"$ref": "#/components/requestBodies/Loop1"})
        assert is_local_ref(result)
