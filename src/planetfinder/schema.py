"""Record schema: the fixed attribute set shared by queries, catalog records, and upload rows."""

from collections.abc import Mapping
from dataclasses import dataclass
from types import MappingProxyType


@dataclass(frozen=True)
class AttributeField:
    """One comparable attribute plus its form metadata."""

    key: str  # Attribute key as used in catalog JSON and upload headers
    label: str  # Form label
    placeholder: str  # Unit hint shown in the empty input
    group: str  # physical / orbital / stellar / system / positional / identifier


ATTRIBUTE_FIELDS: tuple[AttributeField, ...] = (
    AttributeField("radius", "Radius", "Earths", "physical"),
    AttributeField("density", "Density", "g/cm³", "physical"),
    AttributeField("parsecs", "Parsecs from Earth", "Parsecs", "orbital"),
    AttributeField("planetMass", "Planet Mass", "Earths", "physical"),
    AttributeField("vMagnitude", "V (Johnson) Magnitude", "Magnitude", "system"),
    AttributeField("orbitalPeriod", "Orbital Period", "Days", "orbital"),
    AttributeField("eccentricity", "Eccentricity", "", "orbital"),
    AttributeField("insolation", "Insolation Flux", "Earth flux", "orbital"),
    AttributeField("eqTemp", "Equilibrium Temperature", "Kelvin", "orbital"),
    AttributeField("stellarType", "Stellar Type", "Spectral Type", "stellar"),
    AttributeField("stellarTeff", "Stellar Effective Temp", "Kelvin", "stellar"),
    AttributeField("stellarRadius", "Stellar Radius", "Solar Radius", "stellar"),
    AttributeField("stellarMass", "Stellar Mass", "Solar Mass", "stellar"),
    AttributeField("stellarMetallicity", "Stellar Metallicity", "dex", "stellar"),
    AttributeField(
        "stellarGravity", "Stellar Surface Gravity", "log10(cm/s²)", "stellar"
    ),
    AttributeField("systemDistance", "System Distance", "pc", "system"),
    AttributeField("systemVmag", "System V Magnitude", "Magnitude", "system"),
    AttributeField("systemKmag", "System Ks Magnitude", "Magnitude", "system"),
    AttributeField("systemGaiaMag", "Gaia Magnitude", "Magnitude", "system"),
    AttributeField("ra", "Right Ascension (RA)", "deg", "positional"),
    AttributeField("dec", "Declination (Dec)", "deg", "positional"),
    AttributeField("hostName", "Host Name", "Star Name", "identifier"),
    AttributeField("planetName", "Planet Name", "Name", "identifier"),
    AttributeField("discoveryMethod", "Discovery Method", "Method", "identifier"),
)

ATTRIBUTE_KEYS: tuple[str, ...] = tuple(f.key for f in ATTRIBUTE_FIELDS)


def empty_query() -> Mapping[str, str]:
    """Return a read-only query with every attribute unspecified."""
    return MappingProxyType(dict.fromkeys(ATTRIBUTE_KEYS, ""))


def project_row(row: Mapping[str, object]) -> Mapping[str, str]:
    """Project an arbitrary mapping onto exactly ATTRIBUTE_KEYS.

    Missing keys and None become "", other values are coerced with str().
    Keys outside the schema are dropped.

    Args:
        row: Form values or one parsed upload row.

    Returns:
        Read-only query record keyed by ATTRIBUTE_KEYS, in schema order.
    """
    projected: dict[str, str] = {}
    for key in ATTRIBUTE_KEYS:
        value = row.get(key)
        projected[key] = "" if value is None else str(value)
    return MappingProxyType(projected)
