"""UPSC Mains optional subjects: catalogue plus detailed paper trees where available."""

from __future__ import annotations

OPTIONAL_SUBJECTS = {
    "agriculture": {"name": "Agriculture"},
    "animal_husbandry": {"name": "Animal Husbandry & Vet Sci"},
    "anthropology": {"name": "Anthropology"},
    "botany": {"name": "Botany"},
    "chemistry": {"name": "Chemistry"},
    "civil_engineering": {"name": "Civil Engineering"},
    "commerce": {"name": "Commerce & Accountancy"},
    "economics": {"name": "Economics"},
    "electrical_engineering": {"name": "Electrical Engineering"},
    "geography": {
        "name": "Geography",
        "paper1": [
            {"id": "mains-opt1-geo-secA", "name": "Section A: Physical Geography", "children": [
                {"id": "mains-opt1-geo-1", "name": "Geomorphology", "children": [
                    {"id": "mains-opt1-geo-1-1", "name": "Factors controlling landform development"},
                    {"id": "mains-opt1-geo-1-2", "name": "Endogenetic and exogenetic forces"},
                    {"id": "mains-opt1-geo-1-3", "name": "Plate Tectonics and Volcanism"},
                ]},
                {"id": "mains-opt1-geo-2", "name": "Climatology", "children": [
                    {"id": "mains-opt1-geo-2-1", "name": "Temperature and pressure belts"},
                    {"id": "mains-opt1-geo-2-2", "name": "Atmospheric circulation; cyclones"},
                ]},
            ]},
            {"id": "mains-opt1-geo-secB", "name": "Section B: Human Geography", "children": [
                {"id": "mains-opt1-hum-1", "name": "Perspectives in Human Geography", "children": [
                    {"id": "mains-opt1-hum-1-1", "name": "Areal differentiation; regional synthesis"},
                    {"id": "mains-opt1-hum-1-2", "name": "Dualism and dichotomies"},
                ]},
            ]},
        ],
        "paper2": [
            {"id": "mains-opt2-geo-secA", "name": "Section A: Geography of India", "children": [
                {"id": "mains-opt2-ind-1", "name": "Physical Setting", "children": [
                    {"id": "mains-opt2-ind-1-1", "name": "Space relationship with neighboring countries"},
                    {"id": "mains-opt2-ind-1-2", "name": "Structure and relief; drainage systems"},
                ]},
            ]},
            {"id": "mains-opt2-geo-secB", "name": "Section B: Geography of India", "children": [
                {"id": "mains-opt2-ind-B1", "name": "Cultural Setting", "children": [
                    {"id": "mains-opt2-ind-B1-1", "name": "Historical Perspective of Indian Society"},
                ]},
            ]},
        ],
    },
    "geology": {"name": "Geology"},
    "history": {"name": "History"},
    "law": {"name": "Law"},
    "management": {"name": "Management"},
    "mathematics": {"name": "Mathematics"},
    "mechanical_engineering": {"name": "Mechanical Engineering"},
    "medical_science": {"name": "Medical Science"},
    "philosophy": {"name": "Philosophy"},
    "physics": {"name": "Physics"},
    "psir": {
        "name": "Political Science & IR",
        "paper1": [
            {"id": "mains-opt1-psir-secA", "name": "Section A: Political Theory", "children": [
                {"id": "mains-opt1-psir-1", "name": "Political Theory: Meaning and Approaches"},
                {"id": "mains-opt1-psir-2", "name": "Theories of the State", "children": [
                    {"id": "mains-opt1-psir-2-1", "name": "Liberal, Neoliberal, Marxist, Pluralist"},
                ]},
                {"id": "mains-opt1-psir-3", "name": "Indian Political Thought", "children": [
                    {"id": "mains-opt1-psir-3-1", "name": "Dharmashastra, Arthashastra"},
                    {"id": "mains-opt1-psir-3-2", "name": "Gandhi, Ambedkar"},
                ]},
            ]},
            {"id": "mains-opt1-psir-secB", "name": "Section B: Indian Government", "children": [
                {"id": "mains-opt1-psir-B-1", "name": "Indian Nationalism", "children": [
                    {"id": "mains-opt1-psir-B-1-1", "name": "Perspectives on Indian National Movement"},
                ]},
            ]},
        ],
        "paper2": [
            {"id": "mains-opt2-psir-secA", "name": "Section A: Comparative Politics & IR", "children": [
                {"id": "mains-opt2-psir-A-1", "name": "Comparative Politics"},
                {"id": "mains-opt2-psir-A-2", "name": "Key concepts in IR"},
            ]},
            {"id": "mains-opt2-psir-secB", "name": "Section B: India and the World", "children": [
                {"id": "mains-opt2-psir-B-1", "name": "India's Foreign Policy"},
            ]},
        ],
    },
    "psychology": {"name": "Psychology"},
    "public_administration": {"name": "Public Administration"},
    "sociology": {
        "name": "Sociology",
        "paper1": [
            {"id": "mains-opt1-soc-1", "name": "Fundamentals of Sociology", "children": [
                {"id": "mains-opt1-soc-1-1", "name": "Sociology - The Discipline"},
                {"id": "mains-opt1-soc-1-2", "name": "Sociology as Science"},
            ]},
        ],
        "paper2": [
            {"id": "mains-opt2-soc-1", "name": "Indian Society: Structure and Change", "children": [
                {"id": "mains-opt2-soc-1-1", "name": "Introducing Indian Society"},
            ]},
        ],
    },
    "statistics": {"name": "Statistics"},
    "zoology": {"name": "Zoology"},
    "lit_assamese": {"name": "Literature - Assamese"},
    "lit_bengali": {"name": "Literature - Bengali"},
    "lit_bodo": {"name": "Literature - Bodo"},
    "lit_dogri": {"name": "Literature - Dogri"},
    "lit_gujarati": {"name": "Literature - Gujarati"},
    "lit_hindi": {"name": "Literature - Hindi"},
    "lit_kannada": {"name": "Literature - Kannada"},
    "lit_kashmiri": {"name": "Literature - Kashmiri"},
    "lit_konkani": {"name": "Literature - Konkani"},
    "lit_maithili": {"name": "Literature - Maithili"},
    "lit_malayalam": {"name": "Literature - Malayalam"},
    "lit_manipuri": {"name": "Literature - Manipuri"},
    "lit_marathi": {"name": "Literature - Marathi"},
    "lit_nepali": {"name": "Literature - Nepali"},
    "lit_odia": {"name": "Literature - Odia"},
    "lit_punjabi": {"name": "Literature - Punjabi"},
    "lit_sanskrit": {"name": "Literature - Sanskrit"},
    "lit_santhali": {"name": "Literature - Santhali"},
    "lit_sindhi": {"name": "Literature - Sindhi"},
    "lit_tamil": {"name": "Literature - Tamil"},
    "lit_telugu": {"name": "Literature - Telugu"},
    "lit_urdu": {"name": "Literature - Urdu"},
    "lit_english": {"name": "Literature - English"},
}


def list_optional_subjects() -> list[dict]:
    """Return the optional catalogue as ``[{id, name, detailed}]`` for the selection screen."""
    return [
        {"id": subject_id, "name": data["name"], "detailed": "paper1" in data or "paper2" in data}
        for subject_id, data in OPTIONAL_SUBJECTS.items()
    ]


def get_optional_subject(subject_id: str | None) -> dict | None:
    if not subject_id:
        return None
    return OPTIONAL_SUBJECTS.get(subject_id)
