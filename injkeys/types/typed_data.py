"""EIP-712 typed data payload.

Hashing follows ``eth_signTypedData_v4``: the domain separator is built from
the ``EIP712Domain`` fields declared in ``types`` (in declared order, with
declared field types), or from an empty ``EIP712Domain()`` when none is
declared. Domain keys without a declared field are ignored.
"""

import copy
from dataclasses import dataclass
from typing import Any, Dict, List, Mapping, Union

from eth_account._utils.encode_typed_data.encoding_and_hashing import hash_struct
from eth_account.messages import SignableMessage
from eth_utils import keccak

from ..exceptions import InvalidTypedDataError

__all__ = ["TypedData", "TypedDataInput", "DOMAIN_TYPE"]

DOMAIN_TYPE = "EIP712Domain"

TypeFields = List[Dict[str, str]]


@dataclass(frozen=True)
class TypedData:
    """
    Structured EIP-712 payload.

    Holds the four parts of a ``eth_signTypedData_v4`` request and checks
    their shape on construction so malformed payloads fail before hashing.
    Fields are plain dicts, so instances compare by value but are not
    hashable.
    """

    domain: Dict[str, Any]
    types: Dict[str, TypeFields]
    primary_type: str
    message: Dict[str, Any]

    __hash__ = None

    def __post_init__(self) -> None:
        if not isinstance(self.domain, Mapping):
            raise InvalidTypedDataError("Typed data domain must be a mapping")
        if not isinstance(self.message, Mapping):
            raise InvalidTypedDataError("Typed data message must be a mapping")
        if not isinstance(self.types, Mapping) or not self.types:
            raise InvalidTypedDataError("Typed data types must be a non-empty mapping")
        if not isinstance(self.primary_type, str) or not self.primary_type:
            raise InvalidTypedDataError("Typed data primaryType must be a non-empty string")
        if self.primary_type != DOMAIN_TYPE and self.primary_type not in self.types:
            raise InvalidTypedDataError(
                f"Primary type {self.primary_type!r} is not declared in types"
            )

        for type_name, fields in self.types.items():
            if not isinstance(fields, (list, tuple)):
                raise InvalidTypedDataError(f"Fields of {type_name!r} must be a list")
            for entry in fields:
                if (
                    not isinstance(entry, Mapping)
                    or not isinstance(entry.get("name"), str)
                    or not isinstance(entry.get("type"), str)
                ):
                    raise InvalidTypedDataError(
                        f"Field of {type_name!r} must have string 'name' and 'type'"
                    )

        missing = [
            entry["name"] for entry in self.types.get(DOMAIN_TYPE, [])
            if entry["name"] not in self.domain
        ]
        if missing:
            raise InvalidTypedDataError(
                f"Domain is missing declared {DOMAIN_TYPE} fields: {', '.join(missing)}"
            )

    @classmethod
    def from_dict(cls, payload: Mapping[str, Any]) -> "TypedData":
        """
        Build from a JSON-style payload.

        Args:
            payload: Mapping with ``domain``, ``types``, ``primaryType``
                and ``message`` keys

        Returns:
            Validated TypedData

        Raises:
            InvalidTypedDataError: If a key is missing or malformed
        """
        if not isinstance(payload, Mapping):
            raise InvalidTypedDataError(
                f"Typed data must be a mapping, got {type(payload).__name__}"
            )

        missing = [
            key for key in ("domain", "types", "primaryType", "message")
            if key not in payload
        ]
        if missing:
            raise InvalidTypedDataError(f"Typed data is missing keys: {', '.join(missing)}")

        payload = copy.deepcopy(dict(payload))
        return cls(
            domain=payload["domain"],
            types=payload["types"],
            primary_type=payload["primaryType"],
            message=payload["message"],
        )

    def to_dict(self) -> Dict[str, Any]:
        """Return the payload in ``eth_signTypedData_v4`` JSON layout."""
        return {
            "types": copy.deepcopy(self.types),
            "primaryType": self.primary_type,
            "domain": copy.deepcopy(self.domain),
            "message": copy.deepcopy(self.message),
        }

    def _struct_hash(self, type_name: str, data: Mapping[str, Any]) -> bytes:
        types = {DOMAIN_TYPE: [], **self.types}
        try:
            return hash_struct(type_name, types, dict(data))
        except Exception as e:
            raise InvalidTypedDataError(f"Cannot encode {type_name}: {e}") from e

    def domain_separator(self) -> bytes:
        """hashStruct of the domain under the declared EIP712Domain type."""
        return self._struct_hash(DOMAIN_TYPE, self.domain)

    def message_hash(self) -> bytes:
        """hashStruct of the message, empty when primaryType is EIP712Domain."""
        if self.primary_type == DOMAIN_TYPE:
            return b""
        return self._struct_hash(self.primary_type, self.message)

    def signable(self) -> SignableMessage:
        """Encode as an EIP-191 version 0x01 signable message."""
        return SignableMessage(b"\x01", self.domain_separator(), self.message_hash())

    def hash(self) -> bytes:
        """
        Get the 32-byte EIP-712 digest.

        Returns:
            keccak256(0x19 || 0x01 || domainSeparator || hashStruct(message))
        """
        signable = self.signable()
        return keccak(b"\x19" + signable.version + signable.header + signable.body)


TypedDataInput = Union[TypedData, Mapping[str, Any]]
"""Typed data as a TypedData or its JSON-style mapping."""
