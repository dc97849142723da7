ERRORS = {
  "E_LITERAL_FORMAT": "Address literal is malformed",
  "E_LITERAL_OVERFLOW": "Address literal exceeds the variant's bit width",
  "E_PARAM_RANGE": "Decode parameter out of range",
  "E_VARIANT": "Unknown laddr variant",
}

VARIANTS = ("a", "b", "c")
