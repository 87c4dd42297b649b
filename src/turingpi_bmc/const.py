"""Defaults and wire constants for the Turing Pi 2 BMC API."""

DEFAULT_BASE_URL = "https://turingpi.local"

AUTHENTICATE_ENDPOINT = "/api/bmc/authenticate"
BMC_ENDPOINT = "/api/bmc"

# Nodes are addressed 0-3 on the wire, even though the BMC names them node1-node4
NODE_MIN = 0
NODE_MAX = 3

POWER_OFF = 0
POWER_ON = 1
