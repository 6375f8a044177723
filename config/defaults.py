"""Statische Vorgaben: bekannte Hochschulen für die Autovervollständigung."""

# Volle Hochschulnamen, wie sie die Schedule-API erwartet
UNIVERSITIES: tuple[str, ...] = (
    "Санкт-Петербургский горный университет",
    "Санкт-Петербургский государственный университет",
    "Санкт-Петербургский политехнический университет Петра Великого",
    "Московский государственный университет имени М.В. Ломоносова",
    "Московский физико-технический институт",
    "Национальный исследовательский университет «Высшая школа экономики»",
    "Национальный исследовательский университет ИТМО",
    "Московский государственный технический университет имени Н.Э. Баумана",
    "Казанский (Приволжский) федеральный университет",
    "Новосибирский государственный университет",
    "Уральский федеральный университет имени первого Президента России Б.Н. Ельцина",
    "Томский политехнический университет",
)


def filter_universities(query: str) -> list[str]:
    """Hochschulen, deren Name den Suchtext enthält (ohne Groß/Klein)."""
    q = query.lower()
    return [u for u in UNIVERSITIES if q in u.lower()]
