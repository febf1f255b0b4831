FISICO = "FISICO"
DISCIPLINA = "DISCIPLINA"
MENTAL = "MENTAL"
INTELECTO = "INTELECTO"
PRODUTIVIDADE = "PRODUTIVIDADE"
FINANCEIRO = "FINANCEIRO"

ALL_ATTRIBUTES = [FISICO, DISCIPLINA, MENTAL, INTELECTO, PRODUTIVIDADE, FINANCEIRO]

DEFAULT_ATTRIBUTE = PRODUTIVIDADE

# attribute -> storage field on the user record
ATTRIBUTE_FIELDS: dict[str, str] = {
    FISICO: "xp_physical",
    DISCIPLINA: "xp_discipline",
    MENTAL: "xp_mental",
    INTELECTO: "xp_intellect",
    PRODUTIVIDADE: "xp_productivity",
    FINANCEIRO: "xp_financial",
}

XP_FIELDS = list(ATTRIBUTE_FIELDS.values())
