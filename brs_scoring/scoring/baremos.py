"""
Normative Tables (Baremos) — Batería de Riesgo Psicosocial
brs_scoring/scoring/baremos.py

Literal reference data from the Ministerio de la Protección Social battery
manual. Each table maps the five risk levels to an inclusive [lower, upper]
interval on the transformed 0-100 scale.

Sources:
    Forma A dimensions   Tabla 29      Forma B dimensions   Tabla 30
    Forma A domains      Tabla 31      Forma B domains      Tabla 32
    Intralaboral totals  Tabla 33      General totals       Tabla 34

Extralaboral and stress tables are estimates pending confirmation against the
manual and are tagged PROVISIONAL.

Validated and frozen by normative_tables.NormativeTableRepository.
"""

from typing import Dict, Tuple

from brs_scoring.models.enumerations import QuestionnaireVariant, TableProvenance, TableScope

Bounds = Tuple[float, float]
RawTable = Dict[str, Bounds]

# Total-scope keys
TOTAL_INTRALABORAL = "intralaboral"
TOTAL_GENERAL = "general"  # intralaboral + extralaboral

_A = QuestionnaireVariant.INTRALABORAL_A
_B = QuestionnaireVariant.INTRALABORAL_B
_EXTRA = QuestionnaireVariant.EXTRALABORAL
_STRESS = QuestionnaireVariant.STRESS


NORMATIVE_DATA: Dict[QuestionnaireVariant, Dict[TableScope, Dict[str, RawTable]]] = {

    # ── Forma A ───────────────────────────────────────────────────────
    _A: {
        TableScope.DIMENSION: {
            "caracteristicas_liderazgo": {
                "sin_riesgo": (0.0, 3.8),
                "riesgo_bajo": (3.9, 15.4),
                "riesgo_medio": (15.5, 30.8),
                "riesgo_alto": (30.9, 46.2),
                "riesgo_muy_alto": (46.3, 100),
            },
            "relaciones_sociales_trabajo": {
                "sin_riesgo": (0.0, 5.4),
                "riesgo_bajo": (5.5, 16.1),
                "riesgo_medio": (16.2, 25.0),
                "riesgo_alto": (25.1, 37.5),
                "riesgo_muy_alto": (37.6, 100),
            },
            "retroalimentacion_desempeño": {
                "sin_riesgo": (0.0, 10.0),
                "riesgo_bajo": (10.1, 25.0),
                "riesgo_medio": (25.1, 40.0),
                "riesgo_alto": (40.1, 55.0),
                "riesgo_muy_alto": (55.1, 100),
            },
            "relacion_colaboradores": {
                "sin_riesgo": (0.0, 13.9),
                "riesgo_bajo": (14.0, 25.0),
                "riesgo_medio": (25.1, 33.3),
                "riesgo_alto": (33.4, 47.2),
                "riesgo_muy_alto": (47.3, 100),
            },
            "claridad_rol": {
                "sin_riesgo": (0.0, 0.9),
                "riesgo_bajo": (1.0, 10.7),
                "riesgo_medio": (10.8, 21.4),
                "riesgo_alto": (21.5, 39.3),
                "riesgo_muy_alto": (39.4, 100),
            },
            "capacitacion": {
                "sin_riesgo": (0.0, 0.9),
                "riesgo_bajo": (1.0, 16.7),
                "riesgo_medio": (16.8, 33.3),
                "riesgo_alto": (33.4, 50.0),
                "riesgo_muy_alto": (50.1, 100),
            },
            "participacion_manejo_cambio": {
                "sin_riesgo": (0.0, 12.5),
                "riesgo_bajo": (12.6, 25.0),
                "riesgo_medio": (25.1, 37.5),
                "riesgo_alto": (37.6, 50.0),
                "riesgo_muy_alto": (50.1, 100),
            },
            "oportunidades_desarrollo": {
                "sin_riesgo": (0.0, 0.9),
                "riesgo_bajo": (1.0, 6.3),
                "riesgo_medio": (6.4, 18.8),
                "riesgo_alto": (18.9, 31.3),
                "riesgo_muy_alto": (31.4, 100),
            },
            "control_autonomia": {
                "sin_riesgo": (0.0, 8.3),
                "riesgo_bajo": (8.4, 25.0),
                "riesgo_medio": (25.1, 41.7),
                "riesgo_alto": (41.8, 58.3),
                "riesgo_muy_alto": (58.4, 100),
            },
            "demandas_ambientales": {
                "sin_riesgo": (0.0, 14.6),
                "riesgo_bajo": (14.7, 22.9),
                "riesgo_medio": (23.0, 31.3),
                "riesgo_alto": (31.4, 39.6),
                "riesgo_muy_alto": (39.7, 100),
            },
            "demandas_emocionales": {
                "sin_riesgo": (0.0, 16.7),
                "riesgo_bajo": (16.8, 25.0),
                "riesgo_medio": (25.1, 33.3),
                "riesgo_alto": (33.4, 47.2),
                "riesgo_muy_alto": (47.3, 100),
            },
            "demandas_cuantitativas": {
                "sin_riesgo": (0.0, 25.0),
                "riesgo_bajo": (25.1, 33.3),
                "riesgo_medio": (33.4, 45.8),
                "riesgo_alto": (45.9, 54.2),
                "riesgo_muy_alto": (54.3, 100),
            },
            "influencia_trabajo_entorno": {
                "sin_riesgo": (0.0, 18.8),
                "riesgo_bajo": (18.9, 31.3),
                "riesgo_medio": (31.4, 43.8),
                "riesgo_alto": (43.9, 50.0),
                "riesgo_muy_alto": (50.1, 100),
            },
            "exigencias_responsabilidad": {
                "sin_riesgo": (0.0, 37.5),
                "riesgo_bajo": (37.6, 54.2),
                "riesgo_medio": (54.3, 66.7),
                "riesgo_alto": (66.8, 79.2),
                "riesgo_muy_alto": (79.3, 100),
            },
            "demandas_carga_mental": {
                "sin_riesgo": (0.0, 60.0),
                "riesgo_bajo": (60.1, 70.0),
                "riesgo_medio": (70.1, 80.0),
                "riesgo_alto": (80.1, 90.0),
                "riesgo_muy_alto": (90.1, 100),
            },
            "consistencia_rol": {
                "sin_riesgo": (0.0, 15.0),
                "riesgo_bajo": (15.1, 25.0),
                "riesgo_medio": (25.1, 35.0),
                "riesgo_alto": (35.1, 45.0),
                "riesgo_muy_alto": (45.1, 100),
            },
            "demandas_jornada": {
                "sin_riesgo": (0.0, 8.3),
                "riesgo_bajo": (8.4, 25.0),
                "riesgo_medio": (25.1, 33.3),
                "riesgo_alto": (33.4, 50.0),
                "riesgo_muy_alto": (50.1, 100),
            },
            "recompensas_pertenencia": {
                "sin_riesgo": (0.0, 0.9),
                "riesgo_bajo": (1.0, 5.0),
                "riesgo_medio": (5.1, 10.0),
                "riesgo_alto": (10.1, 20.0),
                "riesgo_muy_alto": (20.1, 100),
            },
            "reconocimiento_compensacion": {
                "sin_riesgo": (0.0, 4.2),
                "riesgo_bajo": (4.3, 16.7),
                "riesgo_medio": (16.8, 25.0),
                "riesgo_alto": (25.1, 37.5),
                "riesgo_muy_alto": (37.6, 100),
            },
        },
        TableScope.DOMAIN: {
            "liderazgo_relaciones_sociales": {
                "sin_riesgo": (0.0, 8.3),
                "riesgo_bajo": (8.4, 17.5),
                "riesgo_medio": (17.6, 26.7),
                "riesgo_alto": (26.8, 38.3),
                "riesgo_muy_alto": (38.4, 100),
            },
            "control_trabajo": {
                "sin_riesgo": (0.0, 19.4),
                "riesgo_bajo": (19.5, 26.4),
                "riesgo_medio": (26.5, 34.7),
                "riesgo_alto": (34.8, 43.1),
                "riesgo_muy_alto": (43.2, 100),
            },
            "demandas_trabajo": {
                "sin_riesgo": (0.0, 26.9),
                "riesgo_bajo": (27.0, 33.3),
                "riesgo_medio": (33.4, 37.8),
                "riesgo_alto": (37.9, 44.2),
                "riesgo_muy_alto": (44.3, 100),
            },
            "recompensas": {
                "sin_riesgo": (0.0, 2.5),
                "riesgo_bajo": (2.6, 10.0),
                "riesgo_medio": (10.1, 17.5),
                "riesgo_alto": (17.6, 27.5),
                "riesgo_muy_alto": (27.6, 100),
            },
        },
        TableScope.TOTAL: {
            TOTAL_INTRALABORAL: {
                "sin_riesgo": (0.0, 19.7),
                "riesgo_bajo": (19.8, 25.8),
                "riesgo_medio": (25.9, 31.5),
                "riesgo_alto": (31.6, 38.0),
                "riesgo_muy_alto": (38.1, 100),
            },
            TOTAL_GENERAL: {
                "sin_riesgo": (0.0, 18.8),
                "riesgo_bajo": (18.9, 24.4),
                "riesgo_medio": (24.5, 29.5),
                "riesgo_alto": (29.6, 35.4),
                "riesgo_muy_alto": (35.5, 100),
            },
        },
    },

    # ── Forma B ───────────────────────────────────────────────────────
    _B: {
        TableScope.DIMENSION: {
            "caracteristicas_liderazgo": {
                "sin_riesgo": (0.0, 3.8),
                "riesgo_bajo": (3.9, 13.5),
                "riesgo_medio": (13.6, 25.0),
                "riesgo_alto": (25.1, 38.5),
                "riesgo_muy_alto": (38.6, 100),
            },
            "relaciones_sociales_trabajo": {
                "sin_riesgo": (0.0, 6.3),
                "riesgo_bajo": (6.4, 14.6),
                "riesgo_medio": (14.7, 27.1),
                "riesgo_alto": (27.2, 37.5),
                "riesgo_muy_alto": (37.6, 100),
            },
            "retroalimentacion_desempeño": {
                "sin_riesgo": (0.0, 5.0),
                "riesgo_bajo": (5.1, 20.0),
                "riesgo_medio": (20.1, 30.0),
                "riesgo_alto": (30.1, 50.0),
                "riesgo_muy_alto": (50.1, 100),
            },
            "claridad_rol": {
                "sin_riesgo": (0.0, 0.9),
                "riesgo_bajo": (1.0, 5.0),
                "riesgo_medio": (5.1, 15.0),
                "riesgo_alto": (15.1, 30.0),
                "riesgo_muy_alto": (30.1, 100),
            },
            "capacitacion": {
                "sin_riesgo": (0.0, 0.9),
                "riesgo_bajo": (1.0, 16.7),
                "riesgo_medio": (16.8, 25.0),
                "riesgo_alto": (25.1, 50.0),
                "riesgo_muy_alto": (50.1, 100),
            },
            "participacion_manejo_cambio": {
                "sin_riesgo": (0.0, 16.7),
                "riesgo_bajo": (16.8, 33.3),
                "riesgo_medio": (33.4, 41.7),
                "riesgo_alto": (41.8, 58.3),
                "riesgo_muy_alto": (58.4, 100),
            },
            "oportunidades_desarrollo": {
                "sin_riesgo": (0.0, 12.5),
                "riesgo_bajo": (12.6, 25.0),
                "riesgo_medio": (25.1, 37.5),
                "riesgo_alto": (37.6, 56.3),
                "riesgo_muy_alto": (56.4, 100),
            },
            "control_autonomia": {
                "sin_riesgo": (0.0, 33.3),
                "riesgo_bajo": (33.4, 50.0),
                "riesgo_medio": (50.1, 66.7),
                "riesgo_alto": (66.8, 75.0),
                "riesgo_muy_alto": (75.1, 100),
            },
            "demandas_ambientales": {
                "sin_riesgo": (0.0, 22.9),
                "riesgo_bajo": (23.0, 31.3),
                "riesgo_medio": (31.4, 39.6),
                "riesgo_alto": (39.7, 47.9),
                "riesgo_muy_alto": (48.0, 100),
            },
            "demandas_emocionales": {
                "sin_riesgo": (0.0, 19.4),
                "riesgo_bajo": (19.5, 27.8),
                "riesgo_medio": (27.9, 38.9),
                "riesgo_alto": (39.0, 47.2),
                "riesgo_muy_alto": (47.3, 100),
            },
            "demandas_cuantitativas": {
                "sin_riesgo": (0.0, 16.7),
                "riesgo_bajo": (16.8, 33.3),
                "riesgo_medio": (33.4, 41.7),
                "riesgo_alto": (41.8, 50.0),
                "riesgo_muy_alto": (50.1, 100),
            },
            "influencia_trabajo_entorno": {
                "sin_riesgo": (0.0, 12.5),
                "riesgo_bajo": (12.6, 25.0),
                "riesgo_medio": (25.1, 31.3),
                "riesgo_alto": (31.4, 50.0),
                "riesgo_muy_alto": (50.1, 100),
            },
            "demandas_carga_mental": {
                "sin_riesgo": (0.0, 50.0),
                "riesgo_bajo": (50.1, 65.0),
                "riesgo_medio": (65.1, 75.0),
                "riesgo_alto": (75.1, 85.0),
                "riesgo_muy_alto": (85.1, 100),
            },
            "demandas_jornada": {
                "sin_riesgo": (0.0, 25.0),
                "riesgo_bajo": (25.1, 37.5),
                "riesgo_medio": (37.6, 45.8),
                "riesgo_alto": (45.9, 58.3),
                "riesgo_muy_alto": (58.4, 100),
            },
            "recompensas_pertenencia": {
                "sin_riesgo": (0.0, 0.9),
                "riesgo_bajo": (1.0, 6.3),
                "riesgo_medio": (6.4, 12.5),
                "riesgo_alto": (12.6, 18.8),
                "riesgo_muy_alto": (18.9, 100),
            },
            "reconocimiento_compensacion": {
                "sin_riesgo": (0.0, 0.9),
                "riesgo_bajo": (1.0, 12.5),
                "riesgo_medio": (12.6, 25.0),
                "riesgo_alto": (25.1, 37.5),
                "riesgo_muy_alto": (37.6, 100),
            },
        },
        TableScope.DOMAIN: {
            "liderazgo_relaciones_sociales": {
                "sin_riesgo": (0.0, 9.1),
                "riesgo_bajo": (9.2, 17.7),
                "riesgo_medio": (17.8, 25.6),
                "riesgo_alto": (25.7, 34.8),
                "riesgo_muy_alto": (34.9, 100),
            },
            "control_trabajo": {
                "sin_riesgo": (0.0, 10.7),
                "riesgo_bajo": (10.8, 19.0),
                "riesgo_medio": (19.1, 29.8),
                "riesgo_alto": (29.9, 40.5),
                "riesgo_muy_alto": (40.6, 100),
            },
            "demandas_trabajo": {
                "sin_riesgo": (0.0, 28.5),
                "riesgo_bajo": (28.6, 35.0),
                "riesgo_medio": (35.1, 41.5),
                "riesgo_alto": (41.6, 47.5),
                "riesgo_muy_alto": (47.6, 100),
            },
            "recompensas": {
                "sin_riesgo": (0.0, 4.5),
                "riesgo_bajo": (4.6, 11.4),
                "riesgo_medio": (11.5, 20.5),
                "riesgo_alto": (20.6, 29.5),
                "riesgo_muy_alto": (29.6, 100),
            },
        },
        TableScope.TOTAL: {
            TOTAL_INTRALABORAL: {
                "sin_riesgo": (0.0, 20.6),
                "riesgo_bajo": (20.7, 26.0),
                "riesgo_medio": (26.1, 31.2),
                "riesgo_alto": (31.3, 38.7),
                "riesgo_muy_alto": (38.8, 100),
            },
            TOTAL_GENERAL: {
                "sin_riesgo": (0.0, 19.9),
                "riesgo_bajo": (20.0, 24.8),
                "riesgo_medio": (24.9, 29.5),
                "riesgo_alto": (29.6, 35.4),
                "riesgo_muy_alto": (35.5, 100),
            },
        },
    },

    # ── Extralaboral (provisional) ────────────────────────────────────
    _EXTRA: {
        TableScope.DIMENSION: {
            "tiempo_fuera_trabajo": {
                "sin_riesgo": (0.0, 6.3),
                "riesgo_bajo": (6.4, 25.0),
                "riesgo_medio": (25.1, 37.5),
                "riesgo_alto": (37.6, 50.0),
                "riesgo_muy_alto": (50.1, 100),
            },
            "relaciones_familiares": {
                "sin_riesgo": (0.0, 8.3),
                "riesgo_bajo": (8.4, 25.0),
                "riesgo_medio": (25.1, 33.3),
                "riesgo_alto": (33.4, 50.0),
                "riesgo_muy_alto": (50.1, 100),
            },
            "comunicacion_relaciones_interpersonales": {
                "sin_riesgo": (0.0, 5.6),
                "riesgo_bajo": (5.7, 16.7),
                "riesgo_medio": (16.8, 25.0),
                "riesgo_alto": (25.1, 41.7),
                "riesgo_muy_alto": (41.8, 100),
            },
            "situacion_economica": {
                "sin_riesgo": (0.0, 8.3),
                "riesgo_bajo": (8.4, 25.0),
                "riesgo_medio": (25.1, 41.7),
                "riesgo_alto": (41.8, 58.3),
                "riesgo_muy_alto": (58.4, 100),
            },
            "caracteristicas_vivienda": {
                "sin_riesgo": (0.0, 5.0),
                "riesgo_bajo": (5.1, 10.0),
                "riesgo_medio": (10.1, 25.0),
                "riesgo_alto": (25.1, 35.0),
                "riesgo_muy_alto": (35.1, 100),
            },
            "influencia_entorno_trabajo": {
                "sin_riesgo": (0.0, 12.5),
                "riesgo_bajo": (12.6, 25.0),
                "riesgo_medio": (25.1, 37.5),
                "riesgo_alto": (37.6, 50.0),
                "riesgo_muy_alto": (50.1, 100),
            },
            "desplazamiento_vivienda_trabajo": {
                "sin_riesgo": (0.0, 0.9),
                "riesgo_bajo": (1.0, 12.5),
                "riesgo_medio": (12.6, 25.0),
                "riesgo_alto": (25.1, 43.8),
                "riesgo_muy_alto": (43.9, 100),
            },
        },
    },

    # ── Síntomas de estrés (provisional) ──────────────────────────────
    _STRESS: {
        TableScope.DIMENSION: {
            "sintomas_fisiologicos": {
                "sin_riesgo": (0.0, 25.0),
                "riesgo_bajo": (25.1, 37.5),
                "riesgo_medio": (37.6, 50.0),
                "riesgo_alto": (50.1, 62.5),
                "riesgo_muy_alto": (62.6, 100),
            },
            "sintomas_comportamiento_social": {
                "sin_riesgo": (0.0, 16.7),
                "riesgo_bajo": (16.8, 25.0),
                "riesgo_medio": (25.1, 41.7),
                "riesgo_alto": (41.8, 58.3),
                "riesgo_muy_alto": (58.4, 100),
            },
            "sintomas_intelectuales_laborales": {
                "sin_riesgo": (0.0, 33.3),
                "riesgo_bajo": (33.4, 41.7),
                "riesgo_medio": (41.8, 58.3),
                "riesgo_alto": (58.4, 75.0),
                "riesgo_muy_alto": (75.1, 100),
            },
            "sintomas_psicoemocionales": {
                "sin_riesgo": (0.0, 25.0),
                "riesgo_bajo": (25.1, 35.0),
                "riesgo_medio": (35.1, 45.0),
                "riesgo_alto": (45.1, 60.0),
                "riesgo_muy_alto": (60.1, 100),
            },
        },
    },
}


PROVENANCE: Dict[QuestionnaireVariant, TableProvenance] = {
    _A: TableProvenance.OFFICIAL,
    _B: TableProvenance.OFFICIAL,
    _EXTRA: TableProvenance.PROVISIONAL,
    _STRESS: TableProvenance.PROVISIONAL,
}


FALLBACK_TABLE: RawTable = {
    "sin_riesgo": (0, 20),
    "riesgo_bajo": (20.1, 40),
    "riesgo_medio": (40.1, 60),
    "riesgo_alto": (60.1, 80),
    "riesgo_muy_alto": (80.1, 100),
}
