"""LDAP object name derivation from page file names."""

from __future__ import annotations

from collections.abc import Collection

_SUFFIX_LENGTH = len(".rst")


def ldap_object_name(output_name: str, dicom_defined_files: Collection[str]) -> str:
    """Derive the LDAP object class shown in a page's table caption.

    ``hl7``/``dcm`` pages keep their base name, ``id`` pages map to ``dcmID*``,
    everything else gets a ``dicom`` or ``dcm`` prefix depending on whether the
    object is defined by the DICOM standard.
    """
    end = len(output_name) - _SUFFIX_LENGTH
    if output_name.startswith(("hl7", "dcm")):
        return output_name[:end]
    if output_name.startswith("id"):
        return "dcmID" + output_name[2:end]
    prefix = "dicom" if output_name in dicom_defined_files else "dcm"
    return prefix + output_name[:1].upper() + output_name[1:end]
