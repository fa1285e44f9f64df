"""UPSC Prelims syllabus: GS Paper-I and CSAT, down to micro-topic level."""

from __future__ import annotations

PRELIMS_SYLLABUS = {
    "id": "prelims",
    "name": "Prelims",
    "children": [
        {
            "id": "prelims-gs1", "name": "GS Paper-I", "children": [
                {
                    "id": "prelims-gs1-ca", "name": "Current Events of National and International Importance", "children": [
                        { "id": "prelims-gs1-ca-nat", "name": "National Issues" },
                        { "id": "prelims-gs1-ca-int", "name": "International Issues" },
                        { "id": "prelims-gs1-ca-econ", "name": "Economic Issues" },
                        { "id": "prelims-gs1-ca-env", "name": "Environment/SciTech Issues" },
                        { "id": "prelims-gs1-ca-misc", "name": "Awards, Persons, Places" },
                    ]
                },
                {
                    "id": "prelims-gs1-history", "name": "History of India and Indian National Movement", "children": [
                        {
                            "id": "prelims-gs1-hist-anc", "name": "Ancient India", "children": [
                                { "id": "prelims-gs1-hist-anc-1", "name": "Prehistoric Cultures" },
                                { "id": "prelims-gs1-hist-anc-2", "name": "Indus Valley Civilization" },
                                { "id": "prelims-gs1-hist-anc-3", "name": "Vedic Period (Early & Later)" },
                                { "id": "prelims-gs1-hist-anc-4", "name": "Mahajanapadas & Rise of Magadha" },
                                { "id": "prelims-gs1-hist-anc-5", "name": "Religious Movements (Jainism, Buddhism)" },
                                { "id": "prelims-gs1-hist-anc-6", "name": "Mauryan Empire" },
                                { "id": "prelims-gs1-hist-anc-7", "name": "Post-Mauryan Period (Sungas, Kushanas, Satavahanas)" },
                                { "id": "prelims-gs1-hist-anc-8", "name": "Gupta Empire" },
                                { "id": "prelims-gs1-hist-anc-9", "name": "Post-Gupta Period (Harshavardhana)" },
                                { "id": "prelims-gs1-hist-anc-10", "name": "Sangam Period (South India)" },
                                { "id": "prelims-gs1-hist-anc-11", "name": "Ancient Indian Art, Culture, Philosophy" },
                            ]
                        },
                        {
                            "id": "prelims-gs1-hist-med", "name": "Medieval India", "children": [
                                { "id": "prelims-gs1-hist-med-1", "name": "Early Medieval Period (Rajputs, Cholas, Palas etc.)" },
                                { "id": "prelims-gs1-hist-med-2", "name": "Delhi Sultanate" },
                                { "id": "prelims-gs1-hist-med-3", "name": "Vijayanagara and Bahmani Kingdoms" },
                                { "id": "prelims-gs1-hist-med-4", "name": "Mughal Empire" },
                                { "id": "prelims-gs1-hist-med-5", "name": "Bhakti and Sufi Movements" },
                                { "id": "prelims-gs1-hist-med-6", "name": "Medieval Art, Architecture, Literature" },
                            ]
                        },
                        {
                            "id": "prelims-gs1-hist-mod", "name": "Modern India (Indian National Movement)", "children": [
                                { "id": "prelims-gs1-hist-mod-1", "name": "Advent of Europeans & British Conquest" },
                                { "id": "prelims-gs1-hist-mod-2", "name": "British Policies (Economic, Administrative, Social)" },
                                { "id": "prelims-gs1-hist-mod-3", "name": "Revolt of 1857" },
                                { "id": "prelims-gs1-hist-mod-4", "name": "Socio-Religious Reform Movements" },
                                { "id": "prelims-gs1-hist-mod-5", "name": "Rise of Nationalism & Formation of INC" },
                                { "id": "prelims-gs1-hist-mod-6", "name": "Moderate Phase (1885-1905)" },
                                { "id": "prelims-gs1-hist-mod-7", "name": "Extremist Phase & Swadeshi Movement (1905-1915)" },
                                { "id": "prelims-gs1-hist-mod-8", "name": "Gandhian Era (1915-1947) - Major Movements" },
                                { "id": "prelims-gs1-hist-mod-9", "name": "Revolutionary Nationalism" },
                                { "id": "prelims-gs1-hist-mod-10", "name": "Growth of Communalism & Partition" },
                                { "id": "prelims-gs1-hist-mod-11", "name": "Constitutional Developments under British Rule" },
                                { "id": "prelims-gs1-hist-mod-12", "name": "Post-Independence Consolidation (Brief)" },
                            ]
                        },
                    ]
                },
                {
                    "id": "prelims-gs1-geography", "name": "Indian and World Geography - Physical, Social, Economic", "children": [
                        {
                            "id": "prelims-gs1-geo-physical", "name": "Physical Geography Concepts", "children": [
                                { "id": "prelims-gs1-geo-phy-1", "name": "Origin of Earth, Interior" },
                                { "id": "prelims-gs1-geo-phy-2", "name": "Geomorphology (Plate Tectonics, Landforms)" },
                                { "id": "prelims-gs1-geo-phy-3", "name": "Climatology (Atmosphere, Weather, Climate Zones)" },
                                { "id": "prelims-gs1-geo-phy-4", "name": "Oceanography (Ocean Floor, Currents, Tides)" },
                                { "id": "prelims-gs1-geo-phy-5", "name": "Biogeography (Soils, Vegetation)" },
                            ]
                        },
                        {
                            "id": "prelims-gs1-geo-world", "name": "World Geography", "children": [
                                { "id": "prelims-gs1-geo-world-1", "name": "Major Natural Regions" },
                                { "id": "prelims-gs1-geo-world-2", "name": "Distribution of Key Natural Resources" },
                                { "id": "prelims-gs1-geo-world-3", "name": "Major Industrial Regions" },
                                { "id": "prelims-gs1-geo-world-4", "name": "Population & Settlement Geography" },
                                { "id": "prelims-gs1-geo-world-5", "name": "Mapping - Continents, Countries, Physical Features" },
                            ]
                        },
                        {
                            "id": "prelims-gs1-geo-ind", "name": "Indian Geography", "children": [
                                { "id": "prelims-gs1-geo-ind-1", "name": "Physical Features (Mountains, Plains, Plateau, Coasts, Islands)" },
                                { "id": "prelims-gs1-geo-ind-2", "name": "Drainage System (Rivers)" },
                                { "id": "prelims-gs1-geo-ind-3", "name": "Climate (Monsoon)" },
                                { "id": "prelims-gs1-geo-ind-4", "name": "Natural Vegetation & Wildlife" },
                                { "id": "prelims-gs1-geo-ind-5", "name": "Soils" },
                                { "id": "prelims-gs1-geo-ind-6", "name": "Agriculture" },
                                { "id": "prelims-gs1-geo-ind-7", "name": "Mineral & Energy Resources" },
                                { "id": "prelims-gs1-geo-ind-8", "name": "Industries" },
                                { "id": "prelims-gs1-geo-ind-9", "name": "Transport & Communication" },
                                { "id": "prelims-gs1-geo-ind-10", "name": "Population & Demographics" },
                            ]
                        },
                    ]
                },
                {
                    "id": "prelims-gs1-polity", "name": "Indian Polity and Governance - Constitution, Political System, Panchayati Raj, Public Policy, Rights Issues, etc.", "children": [
                        {
                            "id": "prelims-gs1-pol-const", "name": "Constitution Framework", "children": [
                                { "id": "prelims-gs1-pol-const-1", "name": "Historical Background & Making" },
                                { "id": "prelims-gs1-pol-const-2", "name": "Salient Features" },
                                { "id": "prelims-gs1-pol-const-3", "name": "Preamble" },
                                { "id": "prelims-gs1-pol-const-4", "name": "Union & its Territory" },
                                { "id": "prelims-gs1-pol-const-5", "name": "Citizenship" },
                            ]
                        },
                        {
                            "id": "prelims-gs1-pol-rights", "name": "Fundamental Rights, DPSP, Fundamental Duties", "children": [
                                { "id": "prelims-gs1-pol-rights-fr", "name": "Fundamental Rights" },
                                { "id": "prelims-gs1-pol-rights-dpsp", "name": "Directive Principles of State Policy" },
                                { "id": "prelims-gs1-pol-rights-fd", "name": "Fundamental Duties" },
                            ]
                        },
                        {
                            "id": "prelims-gs1-pol-union", "name": "Union Government", "children": [
                                { "id": "prelims-gs1-pol-union-1", "name": "President & Vice President" },
                                { "id": "prelims-gs1-pol-union-2", "name": "Prime Minister & Council of Ministers" },
                                { "id": "prelims-gs1-pol-union-3", "name": "Parliament (Lok Sabha, Rajya Sabha)" },
                                { "id": "prelims-gs1-pol-union-4", "name": "Supreme Court" },
                            ]
                        },
                        {
                            "id": "prelims-gs1-pol-state", "name": "State Government", "children": [
                                { "id": "prelims-gs1-pol-state-1", "name": "Governor" },
                                { "id": "prelims-gs1-pol-state-2", "name": "Chief Minister & Council of Ministers" },
                                { "id": "prelims-gs1-pol-state-3", "name": "State Legislature" },
                                { "id": "prelims-gs1-pol-state-4", "name": "High Courts & Subordinate Courts" },
                            ]
                        },
                        {
                            "id": "prelims-gs1-pol-local", "name": "Local Government (Panchayati Raj, Municipalities)", "children": [
                                { "id": "prelims-gs1-pol-local-1", "name": "Panchayati Raj (73rd Amendment)" },
                                { "id": "prelims-gs1-pol-local-2", "name": "Municipalities (74th Amendment)" },
                            ]
                        },
                        {
                            "id": "prelims-gs1-pol-bodies", "name": "Constitutional & Non-Constitutional Bodies", "children": [
                                { "id": "prelims-gs1-pol-bodies-c", "name": "Constitutional (EC, UPSC, SFC, CAG, etc.)" },
                                { "id": "prelims-gs1-pol-bodies-nc", "name": "Non-Constitutional (NITI, NHRC, CIC, etc.)" },
                            ]
                        },
                        { "id": "prelims-gs1-pol-misc", "name": "Other Dimensions (Emergency, Amendments, Federalism)" },
                        { "id": "prelims-gs1-pol-governance", "name": "Governance Aspects (Public Policy, Rights Issues)" },
                    ]
                },
                {
                    "id": "prelims-gs1-econ", "name": "Economic and Social Development - Sustainable Development, Poverty, Inclusion, Demographics, Social Sector initiatives, etc.", "children": [
                        { "id": "prelims-gs1-econ-concepts", "name": "Basic Concepts & Definitions (GDP, GNP, Inflation)" },
                        { "id": "prelims-gs1-econ-growth", "name": "Growth, Development & Planning (Five Year Plans, NITI Aayog)" },
                        { "id": "prelims-gs1-econ-poverty", "name": "Poverty, Inclusion & Unemployment" },
                        { "id": "prelims-gs1-econ-demog", "name": "Demographics & Social Sector Initiatives (Health, Education)" },
                        { "id": "prelims-gs1-econ-fiscal", "name": "Fiscal Policy (Budgeting, Taxation, FRBM)" },
                        { "id": "prelims-gs1-econ-monetary", "name": "Monetary Policy & Banking (RBI, MPC, Banks, NBFCs)" },
                        { "id": "prelims-gs1-econ-external", "name": "External Sector (Balance of Payments, FDI, FII, Trade)" },
                        { "id": "prelims-gs1-econ-agri", "name": "Agriculture & Food Management (Crops, PDS, MSP)" },
                        { "id": "prelims-gs1-econ-industry", "name": "Industry & Infrastructure" },
                        { "id": "prelims-gs1-econ-intl", "name": "International Economic Organisations (IMF, WB, WTO)" },
                    ]
                },
                {
                    "id": "prelims-gs1-env", "name": "General issues on Environmental Ecology, Bio-diversity and Climate Change", "children": [
                        { "id": "prelims-gs1-env-concepts", "name": "Basic Concepts (Ecology, Ecosystem, Biodiversity)" },
                        { "id": "prelims-gs1-env-biodiv", "name": "Biodiversity & Conservation (In-situ, Ex-situ, Flora, Fauna)" },
                        { "id": "prelims-gs1-env-climate", "name": "Climate Change (Causes, Impacts, Mitigation, UNFCCC, IPCC)" },
                        { "id": "prelims-gs1-env-pollution", "name": "Environmental Pollution (Air, Water, Soil, Noise)" },
                        { "id": "prelims-gs1-env-acts", "name": "Environmental Laws, Bodies & Policies (India)" },
                        { "id": "prelims-gs1-env-intl", "name": "International Conventions & Organisations" },
                    ]
                },
                {
                    "id": "prelims-gs1-science", "name": "General Science & Technology", "children": [
                        { "id": "prelims-gs1-sci-physics", "name": "Physics (Basic Concepts & Applications)" },
                        { "id": "prelims-gs1-sci-chemistry", "name": "Chemistry (Basic Concepts & Applications)" },
                        { "id": "prelims-gs1-sci-biology", "name": "Biology (Basic Concepts & Applications)" },
                        { "id": "prelims-gs1-sci-tech-space", "name": "Space Technology" },
                        { "id": "prelims-gs1-sci-tech-it", "name": "IT, Computers & Communication" },
                        { "id": "prelims-gs1-sci-tech-nano", "name": "Nanotechnology" },
                        { "id": "prelims-gs1-sci-tech-bio", "name": "Biotechnology" },
                        { "id": "prelims-gs1-sci-tech-ipr", "name": "Intellectual Property Rights" },
                        { "id": "prelims-gs1-sci-tech-defence", "name": "Defence Technology" },
                    ]
                },
            ]
        },
        {
            "id": "prelims-csat", "name": "GS Paper-II (CSAT - Qualifying)", "children": [
                { "id": "prelims-csat-comp", "name": "Comprehension" },
                { "id": "prelims-csat-inter", "name": "Interpersonal skills including communication skills" },
                { "id": "prelims-csat-logical", "name": "Logical reasoning and analytical ability" },
                { "id": "prelims-csat-decision", "name": "Decision-making and problem-solving" },
                { "id": "prelims-csat-mental", "name": "General mental ability" },
                { "id": "prelims-csat-numeracy", "name": "Basic numeracy (Class X level)" },
                { "id": "prelims-csat-data", "name": "Data interpretation (Class X level)" },
            ]
        },
    ]
}
