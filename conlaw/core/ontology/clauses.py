"""Clause references and the static clause table.

Clauses identify the constitutional authority a rule enforces. The table is
immutable lookup data; nothing in the engine creates or edits clauses at
evaluation time.
"""

from __future__ import annotations

from datetime import date

from pydantic import BaseModel, ConfigDict, Field

from .types import ClauseKind


class ClauseRef(BaseModel):
    """Identifier for an Article or Amendment clause."""

    model_config = ConfigDict(frozen=True)

    id: str = Field(..., description="Citation (e.g., 'Art.I §8 cl.3', 'Amend.I')")
    title: str
    kind: ClauseKind
    ratified_on: date


def clause_after(a: ClauseRef, b: ClauseRef) -> bool:
    """True when clause ``a`` was ratified after clause ``b``."""
    return a.ratified_on > b.ratified_on


_ORIGINAL_RATIFICATION = date(1788, 6, 21)
_BILL_OF_RIGHTS = date(1791, 12, 15)


def _article(id: str, title: str) -> ClauseRef:
    return ClauseRef(id=id, title=title, kind=ClauseKind.ARTICLE, ratified_on=_ORIGINAL_RATIFICATION)


def _amendment(id: str, title: str, ratified_on: date = _BILL_OF_RIGHTS) -> ClauseRef:
    return ClauseRef(id=id, title=title, kind=ClauseKind.AMENDMENT, ratified_on=ratified_on)


# =============================================================================
# Articles
# =============================================================================

ART_I_7_BICAMERALISM = _article("Art.I §7 cl.2-3", "Bicameralism & Presentment")
ART_I_7_ORIGINATION = _article("Art.I §7 cl.1", "Origination of Revenue Bills")
ART_I_8_TAX = _article("Art.I §8 cl.1", "Tax and Spend")
ART_I_8_COMMERCE = _article("Art.I §8 cl.3", "Commerce")
ART_I_8_NECESSARY_PROPER = _article("Art.I §8 cl.18", "Necessary & Proper")
ART_I_9_BILL_OF_ATTAINDER = _article("Art.I §9 cl.3", "No Bill of Attainder")
ART_I_9_EX_POST_FACTO = _article("Art.I §9 cl.3", "No Ex Post Facto")
ART_I_10_STATE_LIMITS = _article("Art.I §10", "Restrictions on States")

ART_II_1_PRESIDENT_QUALIFICATIONS = _article("Art.II §1", "President Qualifications & Oath")
ART_II_2_TREATIES = _article("Art.II §2", "Treaties & Appointments")

ART_III_3_TREASON = _article("Art.III §3", "Treason Defined")

ART_IV_2_PRIVILEGES_IMMUNITIES = _article("Art.IV §2", "Privileges and Immunities")
ART_IV_4_GUARANTEE = _article("Art.IV §4", "Guarantee Clause")

ART_V_AMENDMENT = _article("Art.V", "Amendment Process")

ART_VI_SUPREMACY = _article("Art.VI", "Supremacy Clause")
ART_VI_NO_RELIGIOUS_TEST = _article("Art.VI", "No Religious Test")

# Loser side of a Supremacy decision: the state norm that yields.
CONFLICTING_STATE_NORM = _article("Art.I §10", "State Limits / conflicting norm")

# Attribution for results synthesized when a rule fails to run.
ENGINE = _article("Engine", "Rule Execution Error")


# =============================================================================
# Amendments
# =============================================================================

AMEND_I = _amendment("Amend.I", "First Amendment")
AMEND_II = _amendment("Amend.II", "Second Amendment")
AMEND_III = _amendment("Amend.III", "Third Amendment")
AMEND_IV = _amendment("Amend.IV", "Fourth Amendment")
AMEND_V = _amendment("Amend.V", "Fifth Amendment")
AMEND_VI = _amendment("Amend.VI", "Sixth Amendment")
AMEND_VIII = _amendment("Amend.VIII", "Eighth Amendment")
AMEND_IX = _amendment("Amend.IX", "Ninth Amendment")
AMEND_X = _amendment("Amend.X", "Tenth Amendment")

AMEND_XIII = _amendment("Amend.XIII §1", "Abolition of Slavery", date(1865, 12, 6))
AMEND_XIV = _amendment("Amend.XIV §1", "Due Process & Equal Protection", date(1868, 7, 9))
AMEND_SUFFRAGE = _amendment("Amend.XV|XIX|XXIV|XXVI", "Suffrage Protections", date(1919, 6, 4))
AMEND_XVI = _amendment("Amend.XVI", "Income Tax", date(1913, 2, 3))
AMEND_XVIII = _amendment("Amend.XVIII", "Prohibition", date(1919, 1, 16))
AMEND_XXI = _amendment("Amend.XXI", "Repeal of Prohibition", date(1933, 12, 5))
AMEND_XXII = _amendment("Amend.XXII", "Presidential Term Limits", date(1951, 2, 27))
AMEND_XXV = _amendment("Amend.XXV", "Presidential Succession & Disability", date(1967, 2, 10))
AMEND_XXVII = _amendment("Amend.XXVII", "Congressional Pay Changes", date(1992, 5, 7))


CLAUSES: dict[str, ClauseRef] = {
    "ArtI_7_Bicameralism": ART_I_7_BICAMERALISM,
    "ArtI_7_Origination": ART_I_7_ORIGINATION,
    "ArtI_8_Tax": ART_I_8_TAX,
    "ArtI_8_Commerce": ART_I_8_COMMERCE,
    "ArtI_8_NP": ART_I_8_NECESSARY_PROPER,
    "ArtI_9_BillOfAttainder": ART_I_9_BILL_OF_ATTAINDER,
    "ArtI_9_ExPostFacto": ART_I_9_EX_POST_FACTO,
    "ArtI_10_StateLimits": ART_I_10_STATE_LIMITS,
    "ArtII_1_PresidentQuals": ART_II_1_PRESIDENT_QUALIFICATIONS,
    "ArtII_2_Treaties": ART_II_2_TREATIES,
    "ArtIII_3_Treason": ART_III_3_TREASON,
    "ArtIV_2_PI": ART_IV_2_PRIVILEGES_IMMUNITIES,
    "ArtIV_4_Guarantee": ART_IV_4_GUARANTEE,
    "ArtV_Amendment": ART_V_AMENDMENT,
    "ArtVI_Supremacy": ART_VI_SUPREMACY,
    "ArtVI_NoReligiousTest": ART_VI_NO_RELIGIOUS_TEST,
    "Amend_I": AMEND_I,
    "Amend_II": AMEND_II,
    "Amend_III": AMEND_III,
    "Amend_IV": AMEND_IV,
    "Amend_V": AMEND_V,
    "Amend_VI": AMEND_VI,
    "Amend_VIII": AMEND_VIII,
    "Amend_IX": AMEND_IX,
    "Amend_X": AMEND_X,
    "Amend_XIII": AMEND_XIII,
    "Amend_XIV": AMEND_XIV,
    "Amend_XV_XIX_XXIV_XXVI": AMEND_SUFFRAGE,
    "Amend_XVI": AMEND_XVI,
    "Amend_XVIII": AMEND_XVIII,
    "Amend_XXI": AMEND_XXI,
    "Amend_XXII": AMEND_XXII,
    "Amend_XXV": AMEND_XXV,
    "Amend_XXVII": AMEND_XXVII,
}
