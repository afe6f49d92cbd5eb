"""Country code to Portuguese display name."""
from typing import Dict


COUNTRY_NAMES: Dict[str, str] = {
    "AD": "Andorra",
    "AE": "Emirados Árabes Unidos",
    "AO": "Angola",
    "AR": "Argentina",
    "AT": "Áustria",
    "AU": "Austrália",
    "BE": "Bélgica",
    "BG": "Bulgária",
    "BR": "Brasil",
    "CA": "Canadá",
    "CH": "Suíça",
    "CL": "Chile",
    "CN": "China",
    "CO": "Colômbia",
    "CV": "Cabo Verde",
    "CY": "Chipre",
    "CZ": "Chéquia",
    "DE": "Alemanha",
    "DK": "Dinamarca",
    "EE": "Estónia",
    "EG": "Egito",
    "ES": "Espanha",
    "FI": "Finlândia",
    "FR": "França",
    "GB": "Reino Unido",
    "GR": "Grécia",
    "GW": "Guiné-Bissau",
    "HR": "Croácia",
    "HU": "Hungria",
    "IE": "Irlanda",
    "IL": "Israel",
    "IN": "Índia",
    "IS": "Islândia",
    "IT": "Itália",
    "JP": "Japão",
    "KR": "Coreia do Sul",
    "LT": "Lituânia",
    "LU": "Luxemburgo",
    "LV": "Letónia",
    "MA": "Marrocos",
    "MO": "Macau",
    "MT": "Malta",
    "MX": "México",
    "MZ": "Moçambique",
    "NL": "Países Baixos",
    "NO": "Noruega",
    "NZ": "Nova Zelândia",
    "PE": "Peru",
    "PL": "Polónia",
    "PT": "Portugal",
    "RO": "Roménia",
    "RU": "Rússia",
    "SE": "Suécia",
    "SI": "Eslovénia",
    "SK": "Eslováquia",
    "ST": "São Tomé e Príncipe",
    "TL": "Timor-Leste",
    "TR": "Turquia",
    "UA": "Ucrânia",
    "US": "Estados Unidos",
    "UY": "Uruguai",
    "VE": "Venezuela",
    "ZA": "África do Sul",
}


def get_country_name(code: str) -> str:
    """Resolve an ISO 3166 alpha-2 code; unknown codes are returned as given."""
    if not code:
        return ""
    return COUNTRY_NAMES.get(code.strip().upper(), code)
