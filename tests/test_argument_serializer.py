from fabricweaver.shared.modules.command.enums.ca_server_enums import FabricCAServerDBType
from fabricweaver.shared.modules.command.services.argument_serializer import map_parser


class TestMapParser:
    def test_string_and_number_values(self):
        assert map_parser({"input": "a.json", "port": 7059}) == ["--input", "a.json", "--port", "7059"]

    def test_true_is_a_bare_flag(self):
        assert map_parser({"tls": True}) == ["--tls"]

    def test_false_is_omitted(self):
        assert map_parser({"tls": False, "port": 1}) == ["--port", "1"]

    def test_list_is_one_comma_joined_token(self):
        assert map_parser({"csr.hosts": ["a", "b", "c"]}) == ["--csr.hosts", "a,b,c"]

    def test_single_element_list_keeps_list_path(self):
        assert map_parser({"tls.certfiles": ["ca.pem"]}) == ["--tls.certfiles", "ca.pem"]

    def test_enum_renders_its_value(self):
        assert map_parser({"db.type": FabricCAServerDBType.POSTGRES}) == ["--db.type", "postgres"]

    def test_insertion_order_is_kept(self):
        args = {"z": "1", "a": "2", "m": True}
        assert map_parser(args) == ["--z", "1", "--a", "2", "--m"]

    def test_empty_map(self):
        assert map_parser({}) == []
