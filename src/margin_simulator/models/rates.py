"""French TVA and corporate tax (IS) reference rates, as percentages."""

from decimal import Decimal

# TVA rates (métropole)
VAT_NORMAL_RATE = Decimal("20")         # Taux normal
VAT_INTERMEDIATE_RATE = Decimal("10")   # Taux intermédiaire (restauration, travaux)
VAT_REDUCED_RATE = Decimal("5.5")       # Taux réduit (alimentation, livres)
VAT_SUPER_REDUCED_RATE = Decimal("2.1") # Taux particulier (presse, médicaments remboursables)

# Impôt sur les sociétés
CORPORATE_TAX_NORMAL_RATE = Decimal("25")
CORPORATE_TAX_SME_RATE = Decimal("15")  # PME, up to 42 500 € of profit

VAT_RATE_LABELS = {
    VAT_NORMAL_RATE: "Taux normal (20%)",
    VAT_INTERMEDIATE_RATE: "Taux intermédiaire (10%)",
    VAT_REDUCED_RATE: "Taux réduit (5.5%)",
    VAT_SUPER_REDUCED_RATE: "Taux particulier (2.1%)",
}

CORPORATE_TAX_RATE_LABELS = {
    CORPORATE_TAX_NORMAL_RATE: "Taux normal (25%)",
    CORPORATE_TAX_SME_RATE: "Taux réduit PME (15%)",
}
