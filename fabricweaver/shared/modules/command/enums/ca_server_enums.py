from enum import Enum

class FabricCAServerCommand(str, Enum):
    COMPLETION = "completion"
    HELP = "help"
    INIT = "init"
    START = "start"
    VERSION = "version"


class FabricCAServerDBType(str, Enum):
    SQLITE3 = "sqlite3"
    POSTGRES = "postgres"
    MYSQL = "mysql"


class ClientAuthType(str, Enum):
    NO_CLIENT_CERT = "noclientcert"
    REQUEST_CLIENT_CERT = "requestclientcert"
    REQUIRE_ANY_CLIENT_CERT = "requireanyclientcert"
    VERIFY_CLIENT_CERT_IF_GIVEN = "verifyclientcertifgiven"
    REQUIRE_AND_VERIFY_CLIENT_CERT = "requireandverifyclientcert"


class FabricCAServerCurveName(str, Enum):
    FP256BN = "amcl.Fp256bn"
    BN254 = "gurvy.Bn254"
    FP256MIRACLBN = "amcl.Fp256Miraclbn"


class FabricCAServerEnrollmentType(str, Enum):
    X509 = "x509"
    IDEMIX = "idemix"
