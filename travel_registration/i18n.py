"""
Label Catalog.

Default bilingual label tables and the lookup capability handed to the
PDF renderers. Portuguese is the primary language and is always printed;
the active language, when different, is stacked beneath it.

Callers with their own dictionaries build a BilingualLabels directly from
any two ``key -> text`` callables.
"""
from dataclasses import dataclass
from typing import Callable, Dict, Optional, Tuple

from .config import Config


LabelLookup = Callable[[str], str]


LABELS: Dict[str, Dict[str, str]] = {
    "pt": {
        # Document
        "pdfTitle": "Boletim de Alojamento / Registo de Viajante",
        "generatedBy": "Gerado por",
        "pdfPage": "Página",
        "pageOf": "de",
        "pdfGenerated": "Gerado em",
        "attachments": "Anexos",
        "imageLoadError": "Erro ao carregar imagem",
        # Sections
        "personalInfo": "Dados Pessoais",
        "travelDocument": "Documento de Viagem",
        "travelDetails": "Detalhes da Viagem",
        "accommodation": "Alojamento",
        "contactInfo": "Contacto",
        # Personal information
        "firstName": "Nome(s) Próprio(s)",
        "lastName": "Apelido(s)",
        "sex": "Sexo",
        "male": "Masculino",
        "female": "Feminino",
        "other": "Outro",
        "dateOfBirth": "Data de Nascimento",
        "placeOfBirth": "Local de Nascimento",
        "countryOfBirth": "País de Nascimento",
        "nationality": "Nacionalidade",
        # Travel document
        "documentType": "Tipo de Documento",
        "passport": "Passaporte",
        "idCard": "Bilhete de Identidade",
        "otherDoc": "Outro Documento",
        "documentNumber": "Número do Documento",
        "issuingCountry": "País Emissor",
        "issueDate": "Data de Emissão",
        "expiryDate": "Data de Validade",
        # Travel details
        "dateOfEntry": "Data de Entrada",
        "countryOfOrigin": "País de Proveniência",
        "purposeOfStay": "Motivo da Estadia",
        "tourism": "Turismo",
        "business": "Negócios",
        "transit": "Trânsito",
        "otherPurpose": "Outro Motivo",
        "intendedDestination": "Destino Previsto",
        # Accommodation
        "accommodationName": "Nome do Alojamento",
        "address": "Morada",
        "postalCode": "Código Postal",
        "city": "Localidade",
        "checkinDate": "Data de Entrada no Alojamento",
        "checkoutDate": "Data de Saída do Alojamento",
        # Contact
        "phone": "Telefone",
        "email": "Email",
        # Attachment types
        "idFront": "Documento de Identificação (Frente)",
        "idBack": "Documento de Identificação (Verso)",
        "passportPage": "Página do Passaporte",
        "visa": "Visto",
        "otherDocument": "Outro Documento",
    },
    "en": {
        "pdfTitle": "Accommodation Bulletin / Traveller Registration",
        "generatedBy": "Generated by",
        "pdfPage": "Page",
        "pageOf": "of",
        "pdfGenerated": "Generated on",
        "attachments": "Attachments",
        "imageLoadError": "Error loading image",
        "personalInfo": "Personal Information",
        "travelDocument": "Travel Document",
        "travelDetails": "Travel Details",
        "accommodation": "Accommodation",
        "contactInfo": "Contact",
        "firstName": "First Name(s)",
        "lastName": "Last Name(s)",
        "sex": "Sex",
        "male": "Male",
        "female": "Female",
        "other": "Other",
        "dateOfBirth": "Date of Birth",
        "placeOfBirth": "Place of Birth",
        "countryOfBirth": "Country of Birth",
        "nationality": "Nationality",
        "documentType": "Document Type",
        "passport": "Passport",
        "idCard": "ID Card",
        "otherDoc": "Other Document",
        "documentNumber": "Document Number",
        "issuingCountry": "Issuing Country",
        "issueDate": "Issue Date",
        "expiryDate": "Expiry Date",
        "dateOfEntry": "Date of Entry",
        "countryOfOrigin": "Country of Origin",
        "purposeOfStay": "Purpose of Stay",
        "tourism": "Tourism",
        "business": "Business",
        "transit": "Transit",
        "otherPurpose": "Other Purpose",
        "intendedDestination": "Intended Destination",
        "accommodationName": "Accommodation Name",
        "address": "Address",
        "postalCode": "Postal Code",
        "city": "City",
        "checkinDate": "Check-in Date",
        "checkoutDate": "Check-out Date",
        "phone": "Phone",
        "email": "Email",
        "idFront": "ID Document (Front)",
        "idBack": "ID Document (Back)",
        "passportPage": "Passport Page",
        "visa": "Visa",
        "otherDocument": "Other Document",
    },
    "es": {
        "pdfTitle": "Boletín de Alojamiento / Registro de Viajero",
        "generatedBy": "Generado por",
        "pdfPage": "Página",
        "pageOf": "de",
        "pdfGenerated": "Generado el",
        "attachments": "Anexos",
        "imageLoadError": "Error al cargar la imagen",
        "personalInfo": "Datos Personales",
        "travelDocument": "Documento de Viaje",
        "travelDetails": "Detalles del Viaje",
        "accommodation": "Alojamiento",
        "contactInfo": "Contacto",
        "firstName": "Nombre(s)",
        "lastName": "Apellido(s)",
        "sex": "Sexo",
        "male": "Masculino",
        "female": "Femenino",
        "other": "Otro",
        "dateOfBirth": "Fecha de Nacimiento",
        "placeOfBirth": "Lugar de Nacimiento",
        "countryOfBirth": "País de Nacimiento",
        "nationality": "Nacionalidad",
        "documentType": "Tipo de Documento",
        "passport": "Pasaporte",
        "idCard": "Documento de Identidad",
        "otherDoc": "Otro Documento",
        "documentNumber": "Número de Documento",
        "issuingCountry": "País Emisor",
        "issueDate": "Fecha de Expedición",
        "expiryDate": "Fecha de Caducidad",
        "dateOfEntry": "Fecha de Entrada",
        "countryOfOrigin": "País de Procedencia",
        "purposeOfStay": "Motivo de la Estancia",
        "tourism": "Turismo",
        "business": "Negocios",
        "transit": "Tránsito",
        "otherPurpose": "Otro Motivo",
        "intendedDestination": "Destino Previsto",
        "accommodationName": "Nombre del Alojamiento",
        "address": "Dirección",
        "postalCode": "Código Postal",
        "city": "Ciudad",
        "checkinDate": "Fecha de Llegada",
        "checkoutDate": "Fecha de Salida",
        "phone": "Teléfono",
        "email": "Correo Electrónico",
        "idFront": "Documento de Identidad (Anverso)",
        "idBack": "Documento de Identidad (Reverso)",
        "passportPage": "Página del Pasaporte",
        "visa": "Visado",
        "otherDocument": "Otro Documento",
    },
    "fr": {
        "pdfTitle": "Bulletin d'Hébergement / Enregistrement du Voyageur",
        "generatedBy": "Généré par",
        "pdfPage": "Page",
        "pageOf": "sur",
        "pdfGenerated": "Généré le",
        "attachments": "Pièces jointes",
        "imageLoadError": "Erreur de chargement de l'image",
        "personalInfo": "Informations Personnelles",
        "travelDocument": "Document de Voyage",
        "travelDetails": "Détails du Voyage",
        "accommodation": "Hébergement",
        "contactInfo": "Contact",
        "firstName": "Prénom(s)",
        "lastName": "Nom(s)",
        "sex": "Sexe",
        "male": "Masculin",
        "female": "Féminin",
        "other": "Autre",
        "dateOfBirth": "Date de Naissance",
        "placeOfBirth": "Lieu de Naissance",
        "countryOfBirth": "Pays de Naissance",
        "nationality": "Nationalité",
        "documentType": "Type de Document",
        "passport": "Passeport",
        "idCard": "Carte d'Identité",
        "otherDoc": "Autre Document",
        "documentNumber": "Numéro du Document",
        "issuingCountry": "Pays de Délivrance",
        "issueDate": "Date de Délivrance",
        "expiryDate": "Date d'Expiration",
        "dateOfEntry": "Date d'Entrée",
        "countryOfOrigin": "Pays de Provenance",
        "purposeOfStay": "Motif du Séjour",
        "tourism": "Tourisme",
        "business": "Affaires",
        "transit": "Transit",
        "otherPurpose": "Autre Motif",
        "intendedDestination": "Destination Prévue",
        "accommodationName": "Nom de l'Hébergement",
        "address": "Adresse",
        "postalCode": "Code Postal",
        "city": "Ville",
        "checkinDate": "Date d'Arrivée",
        "checkoutDate": "Date de Départ",
        "phone": "Téléphone",
        "email": "E-mail",
        "idFront": "Pièce d'Identité (Recto)",
        "idBack": "Pièce d'Identité (Verso)",
        "passportPage": "Page du Passeport",
        "visa": "Visa",
        "otherDocument": "Autre Document",
    },
}


class LabelTable:
    """Key lookup against one language table; missing keys return the key."""

    def __init__(self, language: str, table: Optional[Dict[str, str]] = None):
        self.language = language
        self.table = table if table is not None else LABELS.get(language, {})

    def lookup(self, key: str) -> str:
        return self.table.get(key, key)

    __call__ = lookup


@dataclass(frozen=True)
class BilingualLabels:
    """Primary and active label lookups for one generation call.

    Attributes:
        language: Active language code
        primary: Lookup into the primary (Portuguese) table
        active: Lookup into the active-language table
        primary_language: Code of the always-shown language
    """
    language: str
    primary: LabelLookup
    active: LabelLookup
    primary_language: str = Config.PRIMARY_LANGUAGE

    @property
    def is_primary(self) -> bool:
        return self.language == self.primary_language

    def stacked(self, key: str) -> Tuple[str, Optional[str]]:
        """Return (primary text, secondary text or None in primary mode)."""
        if self.is_primary:
            return self.primary(key), None
        return self.primary(key), self.active(key)

    def joined(self, key: str, separator: str = " / ") -> str:
        """Single-line form of a stacked label."""
        first, second = self.stacked(key)
        return first if second is None else f"{first}{separator}{second}"


def get_labels(language: str) -> BilingualLabels:
    """Build labels from the bundled catalog.

    Languages without a bundled table use the fallback language table.
    """
    language = (language or Config.PRIMARY_LANGUAGE).lower()
    active_language = language if language in LABELS else Config.FALLBACK_LANGUAGE
    return BilingualLabels(
        language=language,
        primary=LabelTable(Config.PRIMARY_LANGUAGE),
        active=LabelTable(active_language),
    )
