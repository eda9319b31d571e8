from srccli.repos.kvp import ADD_KVP_MUTATION, add_key_value_pair, build_key_value_pair

__all__ = ["ADD_KVP_MUTATION", "add_key_value_pair", "build_key_value_pair"]
