"""Network validators — IP addresses and CIDR subnets, singly or as arrays."""

import ipaddress
import re
from typing import Any, Optional, Union

from paramcheck.config import get_settings
from paramcheck.validation import constants
from paramcheck.validation.base import BaseFieldValidator
from paramcheck.validation.common import arrayify, strip_first_whitespace
from paramcheck.validation.models import FieldOutcome

IPAddress = Union[ipaddress.IPv4Address, ipaddress.IPv6Address]

_DIGITS_RE = re.compile(r"[0-9]+")


def is_valid_ip(value: Any) -> bool:
    """True for an IPv4 or IPv6 address literal."""
    if not isinstance(value, str):
        return False
    try:
        ipaddress.ip_address(value)
    except ValueError:
        return False
    return True


def _parse_address(text: str) -> Optional[IPAddress]:
    # A bare integer is accepted as a numeric address
    try:
        if _DIGITS_RE.fullmatch(text):
            return ipaddress.ip_address(int(text))
        return ipaddress.ip_address(text)
    except ValueError:
        return None


def is_valid_subnet(value: Any) -> bool:
    """True for ``address/bits`` where the address is the network address.

    Prefix lengths run from SUBNET_MIN_IPV4 to 32 for IPv4 and from
    SUBNET_MIN_IPV6 to 128 for IPv6. ``8.8.8.0/24`` is valid, ``8.8.8.8/24``
    is not because host bits are set.
    """
    if not isinstance(value, str):
        return False

    parts = value.split("/")
    if len(parts) != 2:
        return False

    address = _parse_address(parts[0])
    if address is None or not _DIGITS_RE.fullmatch(parts[1]):
        return False

    bits = int(parts[1])
    settings = get_settings()
    if address.version == 4:
        min_bits, max_bits = settings.SUBNET_MIN_IPV4, 32
    else:
        min_bits, max_bits = settings.SUBNET_MIN_IPV6, 128
    if not min_bits <= bits <= max_bits:
        return False

    network = ipaddress.ip_network((address, bits), strict=False)
    return network.network_address == address


class IPValidator(BaseFieldValidator):
    """Exactly one IPv4 or IPv6 address."""

    @property
    def name(self) -> str:
        return "IPValidator"

    def check(self, field: str, value: Any) -> FieldOutcome:
        if not is_valid_ip(value):
            return self._fail(field, constants.INVALID_IP)
        return self._ok(value)


class IPArrayValidator(BaseFieldValidator):
    """One or more IP addresses, as a list or a comma-separated string."""

    @property
    def name(self) -> str:
        return "IPArrayValidator"

    def check(self, field: str, value: Any) -> FieldOutcome:
        if not isinstance(value, (list, tuple, str)):
            return self._fail(field, constants.STR)

        items = arrayify(value)
        if not items:
            return self._fail(field, "invalid IP", [constants.EMPTY_STRING])

        ips: list[str] = []
        invalid: list[str] = []
        for item in items:
            ip = strip_first_whitespace(item) if isinstance(item, str) else item
            if is_valid_ip(ip):
                ips.append(ip)
            else:
                invalid.append(str(ip))

        if invalid:
            message = "invalid IP" if len(invalid) == 1 else "invalid IPs"
            return self._fail(field, message, sorted(invalid))
        return self._ok(ips)


class SubnetValidator(BaseFieldValidator):
    """A single CIDR subnet."""

    @property
    def name(self) -> str:
        return "SubnetValidator"

    def check(self, field: str, value: Any) -> FieldOutcome:
        if not is_valid_subnet(value):
            return self._fail(field, constants.CIDR_SUBNET)
        return self._ok(value)


class SubnetArrayValidator(BaseFieldValidator):
    """One or more CIDR subnets, as a list or a comma-separated string."""

    @property
    def name(self) -> str:
        return "SubnetArrayValidator"

    def check(self, field: str, value: Any) -> FieldOutcome:
        if not isinstance(value, (list, tuple, str)):
            return self._fail(field, constants.STR)

        items = arrayify(value)
        if not items:
            return self._fail(field, constants.CIDR_SUBNET, [constants.EMPTY_STRING])

        subnets: list[str] = []
        invalid: list[str] = []
        for item in items:
            subnet = strip_first_whitespace(item) if isinstance(item, str) else item
            if is_valid_subnet(subnet):
                subnets.append(subnet)
            else:
                invalid.append(str(subnet))

        if invalid:
            return self._fail(field, constants.CIDR_SUBNET, sorted(invalid))
        return self._ok(subnets)


ip_validator = IPValidator()
ip_array_validator = IPArrayValidator()
subnet_validator = SubnetValidator()
subnet_array_validator = SubnetArrayValidator()
