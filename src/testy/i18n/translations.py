"""Bundled message tables, keyed by language code."""

DEFAULT_LANGUAGE = "en"

TRANSLATIONS: dict[str, dict[str, str]] = {
    "en": {
        # assertion messages
        "expected": "expected",
        "to": "to",
        "be_true": "be true",
        "be_false": "be false",
        "be_none": "be None",
        "be_not_none": "not be None",
        "be_equal_to": "be equal to",
        "be_not_equal_to": "be not equal to",
        "include": "include",
        "not_include": "not include",
        "include_exactly": "include exactly",
        "be_empty": "be empty",
        "be_not_empty": "be not empty",
        "match": "match",
        "be_near_to": "be near to",
        "using_precision_digits": "using {digits} precision digits",
        "using_custom_criteria": "using custom criteria",
        "using_method": "using method",
        "missing_equality_method": "Equality cannot be determined. {actual} does not have a method named {method}",
        "expected_no_errors": "expected no errors to happen",
        "but": "but",
        "was_raised": "was raised",
        "expecting_error": "error",
        "to_happen": "to happen",
        "not_to_happen": "not to happen",
        "but_got": "but got",
        "instead": "instead",
        "explicitly_failed": "Explicitly failed",
        # console messages
        "passed": "passed",
        "failed": "failed",
        "errored": "errored",
        "pending": "pending",
        "skipped": "skipped",
        "no_body": "no body defined",
        "summary": "Summary",
        "total": "total",
    },
    "es": {
        "expected": "se esperaba que",
        "to": "",
        "be_true": "sea verdadero",
        "be_false": "sea falso",
        "be_none": "sea None",
        "be_not_none": "no sea None",
        "be_equal_to": "sea igual a",
        "be_not_equal_to": "no sea igual a",
        "include": "incluya a",
        "not_include": "no incluya a",
        "include_exactly": "incluya exactamente a",
        "be_empty": "sea vacío",
        "be_not_empty": "no sea vacío",
        "match": "coincida con",
        "be_near_to": "esté cerca de",
        "using_precision_digits": "usando {digits} dígitos de precisión",
        "using_custom_criteria": "usando un criterio personalizado",
        "using_method": "usando el método",
        "missing_equality_method": "No se puede determinar la igualdad. {actual} no tiene un método llamado {method}",
        "expected_no_errors": "se esperaba que no ocurran errores",
        "but": "pero",
        "was_raised": "fue lanzado",
        "expecting_error": "el error",
        "to_happen": "ocurra",
        "not_to_happen": "no ocurra",
        "but_got": "pero se obtuvo",
        "instead": "en su lugar",
        "explicitly_failed": "Falló explícitamente",
        "passed": "pasó",
        "failed": "falló",
        "errored": "dio error",
        "pending": "pendiente",
        "skipped": "omitido",
        "no_body": "sin cuerpo definido",
        "summary": "Resumen",
        "total": "total",
    },
}
