"""UPSC Mains syllabus: Essay and the four General Studies papers.

Optional subject papers are not defined here; see ``optional_subjects``.
"""

from __future__ import annotations

ESSAY_SYLLABUS = {
    "id": "mains-essay",
    "name": "Essay",
    "children": [
        {"id": "mains-essay-practice", "name": "Essay Writing Practice & Structure"},
        {"id": "mains-essay-philosophical", "name": "Philosophical/Abstract Themes"},
        {"id": "mains-essay-socio-political", "name": "Socio-Political Themes"},
        {"id": "mains-essay-economic", "name": "Economic/Developmental Themes"},
        {"id": "mains-essay-scitech-env", "name": "Sci-Tech/Environment Themes"},
    ],
}

MAINS_GS1_SYLLABUS = {
    "id": "mains-gs1",
    "name": "GS Paper-I (Indian Heritage and Culture, History and Geography of the World and Society)",
    "children": [
        {
            "id": "mains-gs1-art", "name": "Indian Culture - Art Forms, Literature and Architecture", "children": [
                { "id": "mains-gs1-art-visual", "name": "Visual Arts (Architecture, Sculpture, Painting)" },
                { "id": "mains-gs1-art-perform", "name": "Performing Arts (Music, Dance, Theatre)" },
                { "id": "mains-gs1-art-lit", "name": "Literature (Ancient & Modern)" },
            ]
        },
        {
            "id": "mains-gs1-hist-mod", "name": "Modern Indian History (Mid-18th Century - Present)", "children": [
                { "id": "mains-gs1-hist-mod-events", "name": "Significant Events" },
                { "id": "mains-gs1-hist-mod-pers", "name": "Significant Personalities" },
                { "id": "mains-gs1-hist-mod-issues", "name": "Significant Issues" },
            ]
        },
        {
            "id": "mains-gs1-hist-freedom", "name": "The Freedom Struggle - Stages, Contributors, Contributions", "children": [
                { "id": "mains-gs1-hist-freedom-1", "name": "Stages (Moderate, Extremist, Gandhian)" },
                { "id": "mains-gs1-hist-freedom-2", "name": "Important Contributors & Movements" },
            ]
        },
        {
            "id": "mains-gs1-hist-post", "name": "Post-independence Consolidation and Reorganization", "children": [
                { "id": "mains-gs1-hist-post-1", "name": "Consolidation (Integration of States)" },
                { "id": "mains-gs1-hist-post-2", "name": "Reorganization of States (Linguistic etc.)" },
            ]
        },
        {
            "id": "mains-gs1-hist-world", "name": "History of the World (18th Century onwards)", "children": [
                { "id": "mains-gs1-hist-world-ir", "name": "Industrial Revolution" },
                { "id": "mains-gs1-hist-world-ww", "name": "World Wars (I & II)" },
                { "id": "mains-gs1-hist-world-nb", "name": "Redrawal of National Boundaries" },
                { "id": "mains-gs1-hist-world-col", "name": "Colonization & Decolonization" },
                { "id": "mains-gs1-hist-world-isms", "name": "Philosophies (Capitalism, Socialism, Communism)" },
            ]
        },
        {
            "id": "mains-gs1-soc-salient", "name": "Salient features of Indian Society, Diversity", "children": [
                { "id": "mains-gs1-soc-salient-1", "name": "Features (Caste, Family, Unity in Diversity)" },
            ]
        },
        {
            "id": "mains-gs1-soc-women", "name": "Role of Women and Women's Organization", "children": [
                { "id": "mains-gs1-soc-women-1", "name": "Role of Women (Historical, Modern)" },
                { "id": "mains-gs1-soc-women-2", "name": "Women's Organizations & Movements" },
            ]
        },
        {
            "id": "mains-gs1-soc-pop", "name": "Population, Poverty, Development Issues, Urbanization", "children": [
                { "id": "mains-gs1-soc-pop-1", "name": "Population & Associated Issues" },
                { "id": "mains-gs1-soc-pop-2", "name": "Poverty & Developmental Issues" },
                { "id": "mains-gs1-soc-pop-3", "name": "Urbanization: Problems & Remedies" },
            ]
        },
        {
            "id": "mains-gs1-soc-global", "name": "Effects of Globalization on Indian Society", "children": [
                { "id": "mains-gs1-soc-global-1", "name": "Impact on Culture, Economy, Social Structure" },
            ]
        },
        {
            "id": "mains-gs1-soc-comm", "name": "Social Empowerment, Communalism, Regionalism & Secularism", "children": [
                { "id": "mains-gs1-soc-comm-1", "name": "Social Empowerment (SC/ST/OBC/Women)" },
                { "id": "mains-gs1-soc-comm-2", "name": "Communalism" },
                { "id": "mains-gs1-soc-comm-3", "name": "Regionalism" },
                { "id": "mains-gs1-soc-comm-4", "name": "Secularism" },
            ]
        },
        {
            "id": "mains-gs1-geo-worldphy", "name": "Salient features of World's Physical Geography", "children": [
                { "id": "mains-gs1-geo-worldphy-1", "name": "Geomorphology, Climatology, Oceanography" },
            ]
        },
        {
            "id": "mains-gs1-geo-resources", "name": "Distribution of Key Natural Resources (World & India)", "children": [
                { "id": "mains-gs1-geo-resources-1", "name": "Land, Water, Mineral, Energy Resources" },
            ]
        },
        {
            "id": "mains-gs1-geo-industry", "name": "Factors for Location of Industries (World & India)", "children": [
                { "id": "mains-gs1-geo-industry-1", "name": "Primary, Secondary, Tertiary Sectors" },
            ]
        },
        {
            "id": "mains-gs1-geo-phenom", "name": "Important Geophysical Phenomena", "children": [
                { "id": "mains-gs1-geo-phenom-1", "name": "Earthquakes, Tsunami, Volcanoes" },
                { "id": "mains-gs1-geo-phenom-2", "name": "Cyclones, Floods, Droughts" },
            ]
        },
        {
            "id": "mains-gs1-geo-features", "name": "Geographical Features & Location Changes", "children": [
                { "id": "mains-gs1-geo-features-1", "name": "Changes in Water bodies, Ice-caps, Flora, Fauna" },
            ]
        },
    ]
}

MAINS_GS2_SYLLABUS = {
    "id": "mains-gs2",
    "name": "GS Paper-II (Governance, Constitution, Polity, Social Justice and International Relations)",
    "children": [
        {
            "id": "mains-gs2-const", "name": "Indian Constitution - Features, Amendments, Basic Structure etc.", "children": [
                { "id": "mains-gs2-const-1", "name": "Historical Underpinnings, Evolution, Features, Preamble" },
                { "id": "mains-gs2-const-2", "name": "Significant Amendments" },
                { "id": "mains-gs2-const-3", "name": "Basic Structure Doctrine" },
            ]
        },
        {
            "id": "mains-gs2-unionstate", "name": "Functions & Responsibilities (Union & States), Federalism Issues", "children": [
                { "id": "mains-gs2-unionstate-1", "name": "Functions & Responsibilities of Union & States" },
                { "id": "mains-gs2-unionstate-2", "name": "Issues in Federal Structure (Finance, Governor, etc.)" },
                { "id": "mains-gs2-unionstate-3", "name": "Devolution of Powers & Finances to Local Levels" },
            ]
        },
        {
            "id": "mains-gs2-separation", "name": "Separation of Powers, Dispute Redressal", "children": [
                { "id": "mains-gs2-separation-1", "name": "Separation of Powers (Organs - Exec, Leg, Jud)" },
                { "id": "mains-gs2-separation-2", "name": "Dispute Redressal Mechanisms & Institutions" },
            ]
        },
        {
            "id": "mains-gs2-parliament", "name": "Parliament & State Legislatures - Structure, Functioning, Conduct", "children": [
                { "id": "mains-gs2-parliament-1", "name": "Structure, Functioning, Privileges" },
                { "id": "mains-gs2-parliament-2", "name": "Conduct of Business, Role of Committees" },
            ]
        },
        {
            "id": "mains-gs2-executive", "name": "Structure, Organization & Functioning of Executive & Judiciary", "children": [
                { "id": "mains-gs2-executive-1", "name": "Executive (President, PM, CoM, Ministries)" },
                { "id": "mains-gs2-executive-2", "name": "Judiciary (Supreme Court, High Courts, Judicial Review, PIL)" },
            ]
        },
        {
            "id": "mains-gs2-rpa", "name": "Salient Features of the Representation of People's Act", "children": [
                { "id": "mains-gs2-rpa-1", "name": "Key Provisions, Electoral Reforms" },
            ]
        },
        {
            "id": "mains-gs2-apptmnt", "name": "Appointment to Constitutional Posts, Powers, Functions & Responsibilities", "children": [
                { "id": "mains-gs2-apptmnt-1", "name": "Appointments, Powers, Functions (CAG, ECI, UPSC etc.)" },
            ]
        },
        {
            "id": "mains-gs2-bodies", "name": "Statutory, Regulatory and Quasi-judicial bodies", "children": [
                { "id": "mains-gs2-bodies-1", "name": "Statutory (NHRC, NGT etc.)" },
                { "id": "mains-gs2-bodies-2", "name": "Regulatory (RBI, SEBI etc.)" },
                { "id": "mains-gs2-bodies-3", "name": "Quasi-judicial Bodies (Tribunals)" },
            ]
        },
        {
            "id": "mains-gs2-govpolicies", "name": "Government Policies & Interventions for Development", "children": [
                { "id": "mains-gs2-govpolicies-1", "name": "Policy Design, Implementation, Issues" },
            ]
        },
        {
            "id": "mains-gs2-devprocess", "name": "Development Processes - Role of NGOs, SHGs, etc.", "children": [
                { "id": "mains-gs2-devprocess-1", "name": "Role of NGOs, SHGs, Groups & Associations" },
            ]
        },
        {
            "id": "mains-gs2-welfare", "name": "Welfare Schemes for Vulnerable Sections", "children": [
                { "id": "mains-gs2-welfare-1", "name": "Schemes for SC/ST, Women, Children, Minorities" },
                { "id": "mains-gs2-welfare-2", "name": "Mechanisms, Laws, Institutions for Vulnerable Sections" },
            ]
        },
        {
            "id": "mains-gs2-socialsector", "name": "Issues relating to Health, Education, Human Resources", "children": [
                { "id": "mains-gs2-socialsector-1", "name": "Health Sector Issues & Policies" },
                { "id": "mains-gs2-socialsector-2", "name": "Education Sector Issues & Policies" },
                { "id": "mains-gs2-socialsector-3", "name": "Human Resources & Skill Development" },
            ]
        },
        {
            "id": "mains-gs2-poverty", "name": "Issues relating to Poverty and Hunger", "children": [
                { "id": "mains-gs2-poverty-1", "name": "Measurement, Causes, Consequences & Remedies" },
            ]
        },
        {
            "id": "mains-gs2-governance", "name": "Important Aspects of Governance, Transparency & Accountability, e-governance", "children": [
                { "id": "mains-gs2-governance-1", "name": "Transparency, Accountability (RTI, Lokpal)" },
                { "id": "mains-gs2-governance-2", "name": "e-Governance (Models, Successes, Limitations)" },
                { "id": "mains-gs2-governance-3", "name": "Citizen Charters, Good Governance" },
            ]
        },
        {
            "id": "mains-gs2-civilservice", "name": "Role of Civil Services in a Democracy", "children": [
                { "id": "mains-gs2-civilservice-1", "name": "Role, Reforms, Challenges" },
            ]
        },
        {
            "id": "mains-gs2-ir-india", "name": "India and its Neighborhood - Relations", "children": [
                { "id": "mains-gs2-ir-india-1", "name": "Relations with Pakistan, China, Nepal, SL, B'desh etc." },
            ]
        },
        {
            "id": "mains-gs2-ir-bilateral", "name": "Bilateral, Regional and Global Groupings & Agreements involving India", "children": [
                { "id": "mains-gs2-ir-bilateral-1", "name": "Bilateral (USA, Russia, Japan etc.)" },
                { "id": "mains-gs2-ir-bilateral-2", "name": "Regional (SAARC, ASEAN, BIMSTEC)" },
                { "id": "mains-gs2-ir-bilateral-3", "name": "Global (UN, WTO, BRICS, G20)" },
            ]
        },
        {
            "id": "mains-gs2-ir-policies", "name": "Effect of Policies & Politics of Developed/Developing Countries on India's interests", "children": [
                { "id": "mains-gs2-ir-policies-1", "name": "US Policies, China's Policies, Russia-Ukraine etc." },
                { "id": "mains-gs2-ir-policies-2", "name": "Indian Diaspora" },
            ]
        },
        {
            "id": "mains-gs2-ir-institutions", "name": "Important International Institutions, Agencies, Fora", "children": [
                { "id": "mains-gs2-ir-institutions-1", "name": "UN, IMF, World Bank, WTO etc." },
            ]
        },
    ]
}

MAINS_GS3_SYLLABUS = {
    "id": "mains-gs3",
    "name": "GS Paper-III (Technology, Economic Development, Bio diversity, Environment, Security and Disaster Management)",
    "children": [
        {
            "id": "mains-gs3-econ-plan", "name": "Indian Economy - Planning, Mobilization of Resources, Growth, Development", "children": [
                { "id": "mains-gs3-econ-plan-1", "name": "Economic Planning (Post-1991)" },
                { "id": "mains-gs3-econ-plan-2", "name": "Mobilization of Resources" },
                { "id": "mains-gs3-econ-plan-3", "name": "Growth, Development & Employment" },
            ]
        },
        {
            "id": "mains-gs3-econ-inclusive", "name": "Inclusive Growth & Issues", "children": [
                { "id": "mains-gs3-econ-inclusive-1", "name": "Concept, Challenges, Government Initiatives" },
            ]
        },
        {
            "id": "mains-gs3-econ-budget", "name": "Government Budgeting", "children": [
                { "id": "mains-gs3-econ-budget-1", "name": "Components, Types, Fiscal Policy" },
            ]
        },
        {
            "id": "mains-gs3-econ-agri", "name": "Major Crops, Cropping Patterns, Irrigation, Agri-Produce Storage & Marketing", "children": [
                { "id": "mains-gs3-econ-agri-1", "name": "Major Crops & Cropping Patterns" },
                { "id": "mains-gs3-econ-agri-2", "name": "Irrigation Systems" },
                { "id": "mains-gs3-econ-agri-3", "name": "Storage, Transport, Marketing, e-NAM" },
            ]
        },
        {
            "id": "mains-gs3-econ-agri-tech", "name": "e-Technology for Farmers, Issues related to Subsidies, MSP, PDS", "children": [
                { "id": "mains-gs3-econ-agri-tech-1", "name": "Subsidies (Fertilizer, Power, etc.) & MSP" },
                { "id": "mains-gs3-econ-agri-tech-2", "name": "PDS (Objectives, Functioning, Limitations)" },
                { "id": "mains-gs3-econ-agri-tech-3", "name": "e-Technology in Aid of Farmers" },
            ]
        },
        {
            "id": "mains-gs3-econ-food", "name": "Food Processing & Related Industries", "children": [
                { "id": "mains-gs3-econ-food-1", "name": "Scope, Significance, Supply Chain Management" },
            ]
        },
        {
            "id": "mains-gs3-econ-land", "name": "Land Reforms in India", "children": [
                { "id": "mains-gs3-econ-land-1", "name": "Objectives, Measures, Successes & Failures" },
            ]
        },
        {
            "id": "mains-gs3-econ-lpg", "name": "Effects of Liberalization on the Economy", "children": [
                { "id": "mains-gs3-econ-lpg-1", "name": "LPG Reforms of 1991 & Their Impact" },
            ]
        },
        {
            "id": "mains-gs3-econ-infra", "name": "Infrastructure: Energy, Ports, Roads, Airports, Railways etc.", "children": [
                { "id": "mains-gs3-econ-infra-1", "name": "Energy Sector" },
                { "id": "mains-gs3-econ-infra-2", "name": "Physical Infrastructure (Roads, Ports, Railways)" },
            ]
        },
        {
            "id": "mains-gs3-econ-invest", "name": "Investment Models", "children": [
                { "id": "mains-gs3-econ-invest-1", "name": "PPP, FDI, FII, National Monetisation Pipeline" },
            ]
        },
        {
            "id": "mains-gs3-scitech-dev", "name": "Science & Technology - Developments & Applications", "children": [
                { "id": "mains-gs3-scitech-dev-1", "name": "S&T in Everyday Life" },
            ]
        },
        {
            "id": "mains-gs3-scitech-achieve", "name": "Achievements of Indians in S&T; Indigenization", "children": [
                { "id": "mains-gs3-scitech-achieve-1", "name": "Historical & Modern Achievements" },
                { "id": "mains-gs3-scitech-achieve-2", "name": "Indigenization of Technology" },
            ]
        },
        {
            "id": "mains-gs3-scitech-aware", "name": "Awareness in IT, Space, Computers, Robotics, Nano-tech, Bio-tech, IPR", "children": [
                { "id": "mains-gs3-scitech-aware-1", "name": "IT, Computers, Robotics" },
                { "id": "mains-gs3-scitech-aware-2", "name": "Space (ISRO, Missions)" },
                { "id": "mains-gs3-scitech-aware-3", "name": "Nano-technology" },
                { "id": "mains-gs3-scitech-aware-4", "name": "Bio-technology" },
                { "id": "mains-gs3-scitech-aware-5", "name": "IPR Issues" },
            ]
        },
        {
            "id": "mains-gs3-env-conserve", "name": "Conservation, Environmental Pollution & Degradation, EIA", "children": [
                { "id": "mains-gs3-env-conserve-1", "name": "Conservation Efforts (National & International)" },
                { "id": "mains-gs3-env-conserve-2", "name": "Pollution & Degradation (Climate Change)" },
                { "id": "mains-gs3-env-conserve-3", "name": "Environmental Impact Assessment (EIA)" },
            ]
        },
        {
            "id": "mains-gs3-env-disaster", "name": "Disaster and Disaster Management", "children": [
                { "id": "mains-gs3-env-disaster-1", "name": "Types of Disasters, DM Act 2005, NDMA" },
                { "id": "mains-gs3-env-disaster-2", "name": "Sendai Framework, PM's 10-Point Agenda" },
            ]
        },
        {
            "id": "mains-gs3-sec-extremism", "name": "Linkages between Development and Spread of Extremism", "children": [
                { "id": "mains-gs3-sec-extremism-1", "name": "Left-Wing Extremism (LWE)" },
            ]
        },
        {
            "id": "mains-gs3-sec-internal", "name": "Role of External State & Non-state Actors in Internal Security Challenges", "children": [
                { "id": "mains-gs3-sec-internal-1", "name": "Cross-border Terrorism" },
                { "id": "mains-gs3-sec-internal-2", "name": "Insurgency in North-East" },
            ]
        },
        {
            "id": "mains-gs3-sec-comm", "name": "Challenges to Internal Security through Communication Networks, Media, Social Networking", "children": [
                { "id": "mains-gs3-sec-comm-1", "name": "Social Media & Fake News" },
            ]
        },
        {
            "id": "mains-gs3-sec-cyber", "name": "Cyber Security Basics; Money-Laundering", "children": [
                { "id": "mains-gs3-sec-cyber-1", "name": "Cyber Security (Threats, Architecture, Policies)" },
                { "id": "mains-gs3-sec-cyber-2", "name": "Money-Laundering & PMLA" },
            ]
        },
        {
            "id": "mains-gs3-sec-border", "name": "Security Challenges & Management in Border Areas; Organized Crime & Terrorism", "children": [
                { "id": "mains-gs3-sec-border-1", "name": "Border Management (Land & Maritime)" },
                { "id": "mains-gs3-sec-border-2", "name": "Organized Crime & Terrorism Linkages" },
            ]
        },
        {
            "id": "mains-gs3-sec-forces", "name": "Security Forces and Agencies and their Mandate", "children": [
                { "id": "mains-gs3-sec-forces-1", "name": "Central Armed Police Forces (CAPF)" },
                { "id": "mains-gs3-sec-forces-2", "name": "Intelligence Agencies (IB, RAW, NIA)" },
            ]
        },
    ]
}

MAINS_GS4_SYLLABUS = {
    "id": "mains-gs4",
    "name": "GS Paper-IV (Ethics, Integrity, and Aptitude)",
    "children": [
        {
            "id": "mains-gs4-ethics", "name": "Ethics and Human Interface: Essence, Determinants, Consequences", "children": [
                { "id": "mains-gs4-ethics-1", "name": "Essence, Determinants, Consequences" },
                { "id": "mains-gs4-ethics-2", "name": "Dimensions of Ethics (Meta, Normative, Applied)" },
                { "id": "mains-gs4-ethics-3", "name": "Ethics in Private & Public Relationships" },
            ]
        },
        {
            "id": "mains-gs4-humanvalues", "name": "Human Values - Lessons from Great Leaders, Reformers, Administrators", "children": [
                { "id": "mains-gs4-humanvalues-1", "name": "Role of Family, Society, Education in Inculcating Values" },
                { "id": "mains-gs4-humanvalues-2", "name": "Lessons from Leaders, Reformers, Administrators" },
            ]
        },
        {
            "id": "mains-gs4-attitude", "name": "Attitude: Content, Structure, Function; Influence on Thought & Behaviour", "children": [
                { "id": "mains-gs4-attitude-1", "name": "Content, Structure, Function" },
                { "id": "mains-gs4-attitude-2", "name": "Relation with Thought & Behaviour" },
                { "id": "mains-gs4-attitude-3", "name": "Moral & Political Attitudes" },
                { "id": "mains-gs4-attitude-4", "name": "Social Influence & Persuasion" },
            ]
        },
        {
            "id": "mains-gs4-aptitude", "name": "Aptitude and Foundational Values for Civil Service", "children": [
                { "id": "mains-gs4-aptitude-1", "name": "Integrity, Impartiality, Non-partisanship" },
                { "id": "mains-gs4-aptitude-2", "name": "Objectivity, Dedication to Public Service" },
                { "id": "mains-gs4-aptitude-3", "name": "Empathy, Tolerance, Compassion" },
            ]
        },
        {
            "id": "mains-gs4-ei", "name": "Emotional Intelligence - Concepts, Utilities & Application", "children": [
                { "id": "mains-gs4-ei-1", "name": "Models (Goleman etc.)" },
                { "id": "mains-gs4-ei-2", "name": "Application in Administration & Governance" },
            ]
        },
        {
            "id": "mains-gs4-thinkers", "name": "Contributions of Moral Thinkers and Philosophers (India & World)", "children": [
                { "id": "mains-gs4-thinkers-1", "name": "Indian (Kautilya, Gandhi, Ambedkar, Tagore)" },
                { "id": "mains-gs4-thinkers-2", "name": "World (Socrates, Plato, Aristotle, Kant, Mill)" },
            ]
        },
        {
            "id": "mains-gs4-publicservice", "name": "Public/Civil Service Values and Ethics in Public Administration", "children": [
                { "id": "mains-gs4-publicservice-1", "name": "Status & Problems" },
                { "id": "mains-gs4-publicservice-2", "name": "Ethical Concerns & Dilemmas" },
                { "id": "mains-gs4-publicservice-3", "name": "Laws, Rules, Regulations, Conscience as Sources" },
                { "id": "mains-gs4-publicservice-4", "name": "Accountability and Ethical Governance" },
                { "id": "mains-gs4-publicservice-5", "name": "Strengthening Ethical/Moral Values in Governance" },
                { "id": "mains-gs4-publicservice-6", "name": "Ethical Issues in International Relations & Funding" },
                { "id": "mains-gs4-publicservice-7", "name": "Corporate Governance" },
            ]
        },
        {
            "id": "mains-gs4-probity", "name": "Probity in Governance: Concept; Philosophical basis; Codes of Ethics/Conduct; RTI etc.", "children": [
                { "id": "mains-gs4-probity-1", "name": "Concept & Philosophical Basis" },
                { "id": "mains-gs4-probity-2", "name": "Codes of Ethics, Codes of Conduct, Citizen's Charters" },
                { "id": "mains-gs4-probity-3", "name": "Work Culture, Quality of Service Delivery" },
                { "id": "mains-gs4-probity-4", "name": "Utilization of Public Funds" },
                { "id": "mains-gs4-probity-5", "name": "Challenges of Corruption" },
                { "id": "mains-gs4-probity-6", "name": "Right to Information (RTI)" },
            ]
        },
        {
            "id": "mains-gs4-casestudies", "name": "Case Studies on above issues", "children": [
                { "id": "mains-gs4-casestudies-1", "name": "Approach to Case Studies" },
            ]
        },
    ]
}

MAINS_GS_PAPERS = (MAINS_GS1_SYLLABUS, MAINS_GS2_SYLLABUS, MAINS_GS3_SYLLABUS, MAINS_GS4_SYLLABUS)
