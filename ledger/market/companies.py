"""
Fixed list of listed companies, in display order.
"""

from ledger.core.models import Company

COMPANIES: tuple[Company, ...] = (
    Company(
        "BCI",
        "BrassCog Industries",
        "Specializes in manufacturing precision brass cogs and gears for airships and automatons.",
    ),
    Company(
        "AETH",
        "Aether Dynamics",
        "A leading innovator in aether-based propulsion systems and energy harnessing technologies.",
    ),
    Company(
        "CWR",
        "Clockwork Corsairs Ltd.",
        "Designs and produces modular automaton soldiers and personal defense systems.",
    ),
    Company(
        "NASC",
        "Nimbus & Sons Airship Co.",
        "Renowned for their luxury dirigibles and airship travel services.",
    ),
    Company(
        "SSF",
        "Steamspire Foundry",
        "Produces high-quality steam engines, turbines, and other essential industrial machinery.",
    ),
    Company(
        "GLIM",
        "Gaslight Illumination Corp.",
        "A dominant player in gaslamp manufacturing, offering advanced lighting for urban and industrial use.",
    ),
    Company(
        "IRON",
        "Ironclad Armaments",
        "Focuses on creating steam-powered exoskeletons, weaponry, and fortifications.",
    ),
    Company(
        "VAPT",
        "Vaporworks Transcontinental",
        "Operates railways and trade routes with high-speed steam locomotives across continents.",
    ),
    Company(
        "CHIM",
        "Chimera Clockworks",
        "Specializes in bespoke clockwork gadgets, mechanical pets, and high-end timepieces.",
    ),
    Company(
        "GHRT",
        "Gearheart Pharmaceuticals",
        "Develops medical tonics, aetheric remedies, and advanced prosthetic enhancements.",
    ),
)
