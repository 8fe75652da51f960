"""
Static tables of known CAD installations per platform.

Each entry is pure data; the platform strategies turn entries into
ApplicationDescriptor candidates and decide how presence is checked.
"""

from dataclasses import dataclass

# Substituted with the current user's name before any existence check
USERNAME_PLACEHOLDER = "%USERNAME%"


@dataclass(frozen=True)
class CatalogEntry:
    """A known CAD application install location."""

    name: str
    path_template: str
    extensions: tuple[str, ...]
    software_type: str


_AUTOCAD_EXTENSIONS = (".dwg", ".dxf")
_CAXA_EXTENSIONS = (".exb", ".dwg", ".dxf")

WINDOWS_CATALOG: tuple[CatalogEntry, ...] = (
    *(
        CatalogEntry(
            f"AutoCAD {year}",
            f"C:\\Program Files\\Autodesk\\AutoCAD {year}\\acad.exe",
            _AUTOCAD_EXTENSIONS,
            "autocad",
        )
        for year in (2024, 2023, 2022, 2021, 2020)
    ),
    CatalogEntry(
        "CAXA CAD电子图板", "C:\\CAXA\\CAD电子图板\\CAD.exe", _CAXA_EXTENSIONS, "caxa"
    ),
    CatalogEntry("CAXA CAD 2020", "C:\\CAXA\\CAD2020\\CAD.exe", _CAXA_EXTENSIONS, "caxa"),
    CatalogEntry("CAXA CAD 2019", "C:\\CAXA\\CAD2019\\CAD.exe", _CAXA_EXTENSIONS, "caxa"),
    CatalogEntry(
        "SolidWorks",
        "C:\\Program Files\\SOLIDWORKS Corp\\SOLIDWORKS\\SLDWORKS.exe",
        (".sldprt", ".sldasm", ".slddrw", ".dwg", ".dxf"),
        "solidworks",
    ),
    CatalogEntry(
        "Fusion 360",
        f"C:\\Users\\{USERNAME_PLACEHOLDER}\\AppData\\Local\\Autodesk\\webdeploy"
        "\\production\\Fusion360.exe",
        (".f3d", ".step", ".dwg", ".dxf"),
        "fusion360",
    ),
)

MACOS_CATALOG: tuple[CatalogEntry, ...] = (
    CatalogEntry(
        "AutoCAD for Mac",
        "/Applications/Autodesk/AutoCAD.app",
        _AUTOCAD_EXTENSIONS,
        "autocad",
    ),
    CatalogEntry(
        "Fusion 360",
        "/Applications/Autodesk Fusion 360.app",
        (".f3d", ".step", ".dwg", ".dxf"),
        "fusion360",
    ),
    CatalogEntry(
        "SolidWorks",
        "/Applications/SOLIDWORKS.app",
        (".sldprt", ".sldasm", ".slddrw"),
        "solidworks",
    ),
    CatalogEntry(
        "FreeCAD",
        "/Applications/FreeCAD.app",
        (".fcstd", ".step", ".iges"),
        "freecad",
    ),
)

# On Linux the path template is the command name looked up on PATH
LINUX_CATALOG: tuple[CatalogEntry, ...] = (
    CatalogEntry("FreeCAD", "freecad", (".fcstd", ".step"), "freecad"),
    CatalogEntry("LibreCAD", "librecad", (".dxf",), "librecad"),
    CatalogEntry("QCAD", "qcad", (".dxf",), "qcad"),
)
