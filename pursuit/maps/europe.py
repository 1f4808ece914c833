from functools import lru_cache

from ..models.enums import Terrain, Transport
from ..models.locations import Place
from ..models.map import Edge, LocationGraph

C, S, K = Terrain.CITY, Terrain.SEA, Terrain.CASTLE

# (name, abbreviation, terrain) in id order
PLACES: list[tuple[str, str, Terrain]] = [
    ("Adriatic Sea", "AS", S),
    ("Alicante", "AL", C),
    ("Amsterdam", "AM", C),
    ("Athens", "AT", C),
    ("Atlantic Ocean", "AO", S),
    ("Barcelona", "BA", C),
    ("Bari", "BI", C),
    ("Bay of Biscay", "BB", S),
    ("Belgrade", "BE", C),
    ("Berlin", "BR", C),
    ("Black Sea", "BS", S),
    ("Bordeaux", "BO", C),
    ("Brussels", "BU", C),
    ("Bucharest", "BC", C),
    ("Budapest", "BD", C),
    ("Cadiz", "CA", C),
    ("Cagliari", "CG", C),
    ("Castle Dracula", "CD", K),
    ("Clermont Ferrand", "CF", C),
    ("Cologne", "CO", C),
    ("Constanta", "CN", C),
    ("Dublin", "DU", C),
    ("Edinburgh", "ED", C),
    ("English Channel", "EC", S),
    ("Florence", "FL", C),
    ("Frankfurt", "FR", C),
    ("Galatz", "GA", C),
    ("Galway", "GW", C),
    ("Geneva", "GE", C),
    ("Genoa", "GO", C),
    ("Granada", "GR", C),
    ("Hamburg", "HA", C),
    ("Ionian Sea", "IO", S),
    ("Irish Sea", "IR", S),
    ("Klausenburg", "KL", C),
    ("Le Havre", "LE", C),
    ("Leipzig", "LI", C),
    ("Lisbon", "LS", C),
    ("Liverpool", "LV", C),
    ("London", "LO", C),
    ("Madrid", "MA", C),
    ("Manchester", "MN", C),
    ("Marseilles", "MR", C),
    ("Mediterranean Sea", "MS", S),
    ("Milan", "MI", C),
    ("Munich", "MU", C),
    ("Nantes", "NA", C),
    ("Naples", "NP", C),
    ("North Sea", "NS", S),
    ("Nuremburg", "NU", C),
    ("Paris", "PA", C),
    ("Plymouth", "PL", C),
    ("Prague", "PR", C),
    ("Rome", "RO", C),
    ("Salonica", "SA", C),
    ("Santander", "SN", C),
    ("Saragossa", "SR", C),
    ("Sarajevo", "SJ", C),
    ("Sofia", "SO", C),
    ("St Joseph and St Marys", "JM", C),
    ("Strasbourg", "ST", C),
    ("Swansea", "SW", C),
    ("Szeged", "SZ", C),
    ("Toulouse", "TO", C),
    ("Tyrrhenian Sea", "TS", S),
    ("Valona", "VA", C),
    ("Varna", "VR", C),
    ("Venice", "VE", C),
    ("Vienna", "VI", C),
    ("Zagreb", "ZA", C),
    ("Zurich", "ZU", C),
]

ROADS = """
AL-GR AL-MA AL-SR AM-BU AM-CO AT-VA BA-SR BA-TO BI-NP BI-RO
BE-BC BE-KL BE-SJ BE-SO BE-JM BE-SZ BR-HA BR-LI BR-PR
BO-CF BO-NA BO-SR BO-TO BU-CO BU-LE BU-PA BU-ST
BC-CN BC-GA BC-KL BC-SO BD-KL BD-SZ BD-VI BD-ZA
CA-GR CA-LS CA-MA CD-GA CD-KL
CF-GE CF-MR CF-NA CF-PA CF-TO CO-FR CO-HA CO-LI CO-ST
CN-GA CN-VR DU-GW ED-MN FL-GO FL-RO FL-VE FR-LI FR-NU FR-ST
GA-KL GE-MR GE-PA GE-ST GE-ZU GO-MR GO-MI GO-VE GR-MA HA-LI KL-SZ
LI-NU LE-NA LE-PA LS-MA LS-SN LV-MN LV-SW LO-MN LO-PL LO-SW
MA-SN MA-SR MR-MI MR-TO MR-ZU MI-MU MI-VE MI-ZU
MU-NU MU-ST MU-VE MU-VI MU-ZA MU-ZU NA-PA NP-RO NU-PR NU-ST
PA-ST PR-VI SA-SO SA-VA SN-SR SR-TO SJ-SO SJ-JM SJ-VA SJ-ZA
SO-VA SO-VR ST-ZU JM-SZ JM-ZA SZ-ZA VI-ZA
"""

RAILS = """
AL-BA AL-MA BA-SR BI-NP BE-SO BE-SZ BR-HA BR-LI BR-PR BO-PA BO-SR
BU-CO BU-PA BC-CN BC-GA BC-SZ BD-SZ BD-VI CO-FR ED-MN FL-MI FL-RO
FR-LI FR-ST GE-MI GO-MI LI-NU LE-PA LS-MA LV-MN LO-MN LO-SW
MA-SN MA-SR MR-PA MI-ZU MU-NU NP-RO PR-VI SA-SO SO-VR ST-ZU VE-VI
"""

SEA_LANES = """
AS-BI AS-IO AS-VE AL-MS AM-NS AT-IO
AO-BB AO-CA AO-EC AO-GW AO-IR AO-LS AO-MS AO-NS
BA-MS BB-BO BB-NA BB-SN BS-CN BS-IO BS-VR CG-MS CG-TS
DU-IR ED-NS EC-LE EC-LO EC-NS EC-PL GO-TS HA-NS
IO-SA IO-TS IO-VA IR-LV IR-SW MR-MS MS-TS NP-TS RO-TS
"""


def _edges(pairs: str, transport: Transport) -> list[Edge]:
    out = []
    for pair in pairs.split():
        a, b = pair.split("-")
        out.append(Edge(start=a, end=b, transport=transport))
    return out


def build_map() -> LocationGraph:
    places = [
        Place(id=i, name=name, abbrev=abbrev, terrain=terrain)
        for i, (name, abbrev, terrain) in enumerate(PLACES)
    ]
    edges = (
        _edges(ROADS, Transport.ROAD)
        + _edges(RAILS, Transport.RAIL)
        + _edges(SEA_LANES, Transport.SEA)
    )
    return LocationGraph(places=tuple(places), edges=tuple(edges))


@lru_cache(maxsize=1)
def default_map() -> LocationGraph:
    """The 71-location Europe board, built once per process."""
    return build_map()
