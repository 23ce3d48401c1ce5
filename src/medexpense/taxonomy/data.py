#!/usr/bin/env python3
"""
Compiled-in Medical Expense Taxonomy

IRS Publication 502 aligned categories and subcategories. Declaration order
is significant: it is the browse order shown to users and the tie-break
order for search results.
"""

from .models import DOCTOR_PRESCRIBED_ONLY, MedicalCategory

MEDICAL_CATEGORY_DATA: list[dict] = [
    {
        "id": "doctor-medical",
        "label": "Doctor & Medical Services",
        "irs_reference_tag": "medical_services",
        "description": "Professional medical care and services",
        "search_terms": ["doctor", "physician", "medical", "appointment", "visit", "consultation"],
        "subcategories": [
            {
                "id": "physician-visits",
                "label": "Doctor Visits",
                "irs_reference_tag": "physician_services",
                "description": "Regular doctor appointments and consultations",
                "search_terms": ["doctor visit", "physician", "family doctor", "gp", "general practitioner"],
                "examples": ["Family doctor visit", "Annual check-up", "Sick visit"],
            },
            {
                "id": "specialists",
                "label": "Specialist Care",
                "irs_reference_tag": "specialist_services",
                "description": "Chiropractor, osteopath, psychiatrist, psychologist, Christian Science practitioner",
                "search_terms": [
                    "specialist",
                    "chiropractor",
                    "osteopath",
                    "psychiatrist",
                    "psychologist",
                    "christian science",
                ],
                "examples": ["Cardiologist", "Dermatologist", "Orthopedist", "Neurologist"],
            },
            {
                "id": "therapy",
                "label": "Therapy Services",
                "irs_reference_tag": "therapy_services",
                "description": "Mental health, physical, occupational, speech therapy",
                "search_terms": [
                    "therapy",
                    "physical therapy",
                    "occupational therapy",
                    "speech therapy",
                    "mental health",
                ],
                "examples": ["PT session", "Counseling", "Speech pathology"],
            },
            {
                "id": "diagnostic-tests",
                "label": "Tests & Diagnostics",
                "irs_reference_tag": "diagnostic_services",
                "description": "X-rays, lab fees, body scans, pregnancy tests",
                "search_terms": ["x-ray", "lab", "test", "scan", "mri", "ct scan", "ultrasound", "blood work"],
                "examples": ["Blood work", "MRI scan", "X-ray", "Pregnancy test"],
            },
            {
                "id": "annual-physicals",
                "label": "Annual Physicals",
                "irs_reference_tag": "preventive_care",
                "description": "Annual physical examinations and preventive care",
                "search_terms": ["annual physical", "checkup", "wellness visit", "preventive"],
                "examples": ["Annual wellness exam", "Preventive screening"],
            },
            {
                "id": "operations",
                "label": "Surgery & Operations",
                "irs_reference_tag": "surgical_procedures",
                "description": "Non-cosmetic, medically necessary operations",
                "search_terms": ["surgery", "operation", "procedure", "surgical"],
                "examples": ["Appendectomy", "Joint replacement", "Heart surgery"],
            },
            {
                "id": "legal-medical",
                "label": "Legal Fees (Medical)",
                "irs_reference_tag": "legal_fees_medical",
                "description": "Legal fees necessary to authorize medical treatment",
                "search_terms": ["legal fees", "attorney", "guardianship", "medical authorization"],
                "examples": ["Guardianship for medical decisions", "Medical power of attorney"],
            },
        ],
    },
    {
        "id": "hospital-nursing",
        "label": "Hospital, Nursing & Long-Term Care",
        "irs_reference_tag": "institutional_care",
        "description": "Hospital stays, nursing care, and long-term care services",
        "search_terms": ["hospital", "nursing home", "long-term care", "assisted living"],
        "subcategories": [
            {
                "id": "hospital-stays",
                "label": "Hospital Stays",
                "irs_reference_tag": "hospital_care",
                "description": "Hospital stays including meals and lodging if for medical care",
                "search_terms": ["hospital", "inpatient", "emergency room", "er", "admission"],
                "examples": ["Emergency room visit", "Surgery stay", "Inpatient treatment"],
            },
            {
                "id": "nursing-home",
                "label": "Nursing Home Care",
                "irs_reference_tag": "nursing_home_care",
                "description": "Nursing home care if primarily for medical care",
                "search_terms": ["nursing home", "skilled nursing", "nursing facility"],
                "examples": ["Skilled nursing facility", "Memory care unit"],
            },
            {
                "id": "nursing-services",
                "label": "Nursing Services",
                "irs_reference_tag": "nursing_services",
                "description": "Home or facility nursing, including attendant wages for medical tasks",
                "search_terms": ["nurse", "nursing", "home health", "attendant", "caregiver"],
                "examples": ["Home health aide", "Private duty nurse", "Medical attendant"],
            },
            {
                "id": "long-term-care",
                "label": "Long-Term Care Services",
                "irs_reference_tag": "long_term_care_services",
                "description": "Services for diagnosed chronically ill with prescribed care plan",
                "search_terms": ["long-term care", "chronic care", "custodial care"],
                "examples": ["Adult day care", "Respite care", "Chronic illness management"],
            },
            {
                "id": "assisted-living",
                "label": "Assisted Living",
                "irs_reference_tag": "assisted_living_disability",
                "description": "Assisted living or special homes if prescribed for disability",
                "search_terms": ["assisted living", "special home", "disability care", "group home"],
                "examples": ["Memory care facility", "Disability group home"],
            },
        ],
    },
    {
        "id": "dental-vision",
        "label": "Dental & Vision",
        "irs_reference_tag": "dental_vision_care",
        "description": "Dental and vision care expenses",
        "search_terms": ["dental", "dentist", "vision", "eye", "glasses", "contacts"],
        "subcategories": [
            {
                "id": "dental-treatment",
                "label": "Dental Care",
                "irs_reference_tag": "dental_treatment",
                "description": "Cleanings, fillings, dentures, braces, extractions",
                "search_terms": [
                    "dentist",
                    "dental",
                    "cleaning",
                    "filling",
                    "crown",
                    "root canal",
                    "braces",
                    "dentures",
                ],
                "examples": ["Teeth cleaning", "Cavity filling", "Root canal", "Braces"],
            },
            {
                "id": "eyeglasses-contacts",
                "label": "Glasses & Contacts",
                "irs_reference_tag": "vision_correction",
                "description": "Eyeglasses, contact lenses, and supplies",
                "search_terms": ["glasses", "eyeglasses", "contacts", "contact lenses", "prescription glasses"],
                "examples": ["Prescription glasses", "Contact lenses", "Lens solution"],
            },
            {
                "id": "eye-surgery",
                "label": "Eye Surgery",
                "irs_reference_tag": "eye_surgery",
                "description": "LASIK, radial keratotomy, and other eye procedures",
                "search_terms": ["lasik", "eye surgery", "radial keratotomy", "cataract surgery"],
                "examples": ["LASIK surgery", "Cataract removal", "Retinal surgery"],
            },
            {
                "id": "vision-aids",
                "label": "Vision Aids",
                "irs_reference_tag": "vision_aids",
                "description": "Braille books/magazines, closed-caption TVs",
                "search_terms": ["braille", "vision aid", "closed caption", "magnifier"],
                "examples": ["Braille materials", "Screen reader", "Magnifying equipment"],
            },
        ],
    },
    {
        "id": "prescriptions-supplies",
        "label": "Prescriptions & Medical Supplies",
        "irs_reference_tag": "prescriptions_supplies",
        "description": "Prescription medications and medical supplies",
        "search_terms": ["prescription", "medication", "medicine", "pharmacy", "supplies"],
        "subcategories": [
            {
                "id": "prescription-medicines",
                "label": "Prescription Medications",
                "irs_reference_tag": "prescription_drugs",
                "description": "Prescription medicines and insulin",
                "search_terms": ["prescription", "medication", "medicine", "insulin", "pharmacy", "rx"],
                "examples": ["Blood pressure medication", "Insulin", "Antibiotics"],
            },
            {
                "id": "birth-control",
                "label": "Birth Control (Prescribed)",
                "irs_reference_tag": "prescribed_birth_control",
                "description": "Birth control pills when prescribed",
                "search_terms": ["birth control", "contraceptive", "oral contraceptive"],
                "examples": ["Birth control pills", "IUD insertion"],
            },
            {
                "id": "medical-supplies",
                "label": "Medical Supplies",
                "irs_reference_tag": "medical_supplies",
                "description": "Bandages, PPE like masks/sanitizer, condoms",
                "search_terms": ["bandages", "medical supplies", "mask", "sanitizer", "gauze", "condoms"],
                "examples": ["First aid supplies", "Medical masks", "Hand sanitizer"],
            },
            {
                "id": "pregnancy-tests",
                "label": "Pregnancy Test Kits",
                "irs_reference_tag": "pregnancy_test_kits",
                "description": "Home pregnancy test kits",
                "search_terms": ["pregnancy test", "home pregnancy test"],
                "examples": ["Home pregnancy test", "Digital pregnancy test"],
            },
        ],
    },
    {
        "id": "medical-equipment",
        "label": "Medical Equipment & Aids",
        "irs_reference_tag": "medical_equipment",
        "description": "Medical equipment, devices, and assistive aids",
        "search_terms": ["wheelchair", "equipment", "medical device", "prosthetic", "hearing aid"],
        "subcategories": [
            {
                "id": "wheelchairs",
                "label": "Wheelchairs",
                "irs_reference_tag": "wheelchair_equipment",
                "description": "Purchase, maintenance, and repairs of wheelchairs",
                "search_terms": ["wheelchair", "mobility chair", "wheelchair repair"],
                "examples": ["Manual wheelchair", "Electric wheelchair", "Wheelchair maintenance"],
            },
            {
                "id": "prosthetics",
                "label": "Prosthetics",
                "irs_reference_tag": "artificial_devices",
                "description": "Artificial limbs, teeth, and other prosthetics",
                "search_terms": ["prosthetic", "artificial limb", "artificial teeth", "prosthesis"],
                "examples": ["Prosthetic leg", "Dentures", "Artificial arm"],
            },
            {
                "id": "mobility-aids",
                "label": "Mobility Aids",
                "irs_reference_tag": "mobility_aids",
                "description": "Crutches and other mobility assistance",
                "search_terms": ["crutches", "walker", "cane", "mobility aid"],
                "examples": ["Crutches", "Walker", "Walking cane"],
            },
            {
                "id": "oxygen-equipment",
                "label": "Oxygen Equipment",
                "irs_reference_tag": "oxygen_equipment",
                "description": "Oxygen and oxygen equipment",
                "search_terms": ["oxygen", "oxygen tank", "concentrator", "cpap"],
                "examples": ["Oxygen concentrator", "CPAP machine", "Oxygen tanks"],
            },
            {
                "id": "hearing-aids",
                "label": "Hearing Aids",
                "irs_reference_tag": "hearing_aids",
                "description": "Hearing aids plus batteries and maintenance",
                "search_terms": ["hearing aid", "hearing device", "hearing aid battery"],
                "examples": ["Digital hearing aids", "Hearing aid batteries", "Cochlear implant"],
            },
            {
                "id": "breast-pumps",
                "label": "Breast Pumps & Lactation",
                "irs_reference_tag": "lactation_supplies",
                "description": "Breast pumps and lactation supplies",
                "search_terms": ["breast pump", "lactation", "nursing supplies"],
                "examples": ["Electric breast pump", "Nursing pads", "Milk storage bags"],
            },
            {
                "id": "medical-wigs",
                "label": "Medical Wigs",
                "irs_reference_tag": "medical_wigs",
                "description": "Wig if prescribed after disease-related hair loss",
                "search_terms": ["wig", "hairpiece", "hair loss", "medical wig"],
                "examples": ["Chemotherapy wig", "Alopecia hairpiece"],
            },
            {
                "id": "service-animals",
                "label": "Service Animals",
                "irs_reference_tag": "service_animals",
                "description": "Guide dog or service animal (purchase, training, food, vet care)",
                "search_terms": ["service dog", "guide dog", "service animal", "therapy animal"],
                "examples": ["Guide dog training", "Service dog food", "Therapy animal care"],
            },
            {
                "id": "disability-equipment",
                "label": "Disability Equipment",
                "irs_reference_tag": "disability_equipment",
                "description": "Telephone and TV equipment for hearing/speech disabilities",
                "search_terms": ["tty", "amplified phone", "closed caption", "disability equipment"],
                "examples": ["TTY device", "Amplified telephone", "Closed caption decoder"],
            },
        ],
    },
    {
        "id": "home-modifications",
        "label": "Home & Vehicle Modifications",
        "irs_reference_tag": "accessibility_modifications",
        "description": "Home and vehicle accessibility improvements",
        "search_terms": ["home modification", "ramp", "accessibility", "grab bar", "vehicle modification"],
        "subcategories": [
            {
                "id": "accessibility-improvements",
                "label": "Home Accessibility",
                "irs_reference_tag": "home_accessibility",
                "description": "Ramps, widened doors/hallways, grab bars, alarms",
                "search_terms": ["ramp", "grab bar", "accessibility", "door widening", "bathroom modification"],
                "examples": ["Wheelchair ramp", "Bathroom grab bars", "Doorway widening"],
            },
            {
                "id": "modified-rooms",
                "label": "Room Modifications",
                "irs_reference_tag": "room_modifications",
                "description": "Modified bathrooms and kitchens for accessibility",
                "search_terms": ["bathroom modification", "kitchen modification", "accessible bathroom"],
                "examples": ["Roll-in shower", "Lowered countertops", "Accessible kitchen"],
            },
            {
                "id": "lifts-equipment",
                "label": "Lifts & Equipment",
                "irs_reference_tag": "lift_equipment",
                "description": "Porch/stair lifts (not elevators)",
                "search_terms": ["stair lift", "porch lift", "chair lift"],
                "examples": ["Stairlift installation", "Porch lift", "Curved stairlift"],
            },
            {
                "id": "warning-systems",
                "label": "Warning Systems",
                "irs_reference_tag": "warning_systems",
                "description": "Modified smoke detectors or warning systems",
                "search_terms": ["smoke detector", "warning system", "alert system", "safety alarm"],
                "examples": ["Flashing smoke alarm", "Vibrating alarm", "Medical alert system"],
            },
            {
                "id": "ground-modifications",
                "label": "Ground Access",
                "irs_reference_tag": "ground_access",
                "description": "Grading ground for access",
                "search_terms": ["grading", "ground modification", "driveway", "pathway"],
                "examples": ["Driveway grading", "Accessible pathway", "Ground leveling"],
            },
            {
                "id": "vehicle-modifications",
                "label": "Vehicle Modifications",
                "irs_reference_tag": "vehicle_accessibility",
                "description": "Hand controls, wheelchair lifts, accessible vehicle design",
                "search_terms": ["hand controls", "wheelchair lift", "vehicle modification", "accessible vehicle"],
                "examples": ["Hand controls installation", "Wheelchair lift", "Vehicle ramp"],
            },
            {
                "id": "lead-paint-removal",
                "label": "Lead Paint Removal",
                "irs_reference_tag": "lead_paint_removal",
                "description": "Lead-based paint removal if prescribed for child with lead poisoning",
                "search_terms": ["lead paint", "lead removal", "lead poisoning"],
                "examples": ["Lead paint abatement", "Lead remediation"],
            },
        ],
    },
    {
        "id": "insurance-premiums",
        "label": "Insurance & Premiums",
        "irs_reference_tag": "insurance_premiums",
        "description": "Health insurance premiums and related costs",
        "search_terms": ["insurance", "premium", "medicare", "medicaid", "health insurance"],
        "subcategories": [
            {
                "id": "health-insurance",
                "label": "Health Insurance Premiums",
                "irs_reference_tag": "health_insurance_premiums",
                "description": "Health, dental, and vision insurance premiums",
                "search_terms": ["health insurance", "dental insurance", "vision insurance", "premium"],
                "examples": ["Monthly health premium", "Dental plan premium", "Vision coverage"],
            },
            {
                "id": "hmo-premiums",
                "label": "HMO Premiums",
                "irs_reference_tag": "hmo_premiums",
                "description": "Health Maintenance Organization premiums",
                "search_terms": ["hmo", "hmo premium", "health maintenance organization"],
                "examples": ["HMO monthly fee", "HMO enrollment"],
            },
            {
                "id": "medicare-premiums",
                "label": "Medicare Premiums",
                "irs_reference_tag": "medicare_premiums",
                "description": "Medicare Part A (if voluntary), Part B, Part D",
                "search_terms": ["medicare", "medicare part a", "medicare part b", "medicare part d"],
                "examples": ["Medicare Part B premium", "Medicare Part D premium", "Medicare supplement"],
            },
            {
                "id": "long-term-care-insurance",
                "label": "Long-Term Care Insurance",
                "irs_reference_tag": "ltc_insurance_premiums",
                "description": "Qualified long-term care insurance premiums (subject to age-based limits)",
                "search_terms": ["long-term care insurance", "ltc insurance", "ltci"],
                "examples": ["LTC insurance premium", "Long-term care policy"],
            },
            {
                "id": "prepaid-insurance",
                "label": "Prepaid Insurance",
                "irs_reference_tag": "prepaid_insurance",
                "description": "Prepaid insurance premiums meeting IRS requirements",
                "search_terms": ["prepaid insurance", "prepaid premium"],
                "examples": ["Annual premium payment", "Prepaid health coverage"],
            },
            {
                "id": "lifetime-care-contracts",
                "label": "Lifetime Care Contracts",
                "irs_reference_tag": "lifetime_care_contracts",
                "description": "Lifetime care / founder's fee contracts (portion allocable to medical care)",
                "search_terms": ["lifetime care", "founders fee", "continuing care", "ccrc"],
                "examples": ["CCRC entrance fee", "Lifetime care contract"],
            },
            {
                "id": "sick-leave-premiums",
                "label": "Sick Leave Premiums",
                "irs_reference_tag": "sick_leave_premiums",
                "description": "Unused sick leave applied to premiums",
                "search_terms": ["sick leave", "unused sick leave", "sick leave premium"],
                "examples": ["Sick leave for insurance", "Unused sick time premium"],
            },
        ],
    },
    {
        "id": "transportation-travel",
        "label": "Transportation & Travel",
        "irs_reference_tag": "medical_transportation",
        "description": "Transportation and travel for medical care",
        "search_terms": ["transportation", "travel", "mileage", "ambulance", "medical travel"],
        "subcategories": [
            {
                "id": "ambulance",
                "label": "Ambulance Services",
                "irs_reference_tag": "ambulance_services",
                "description": "Emergency and non-emergency ambulance services",
                "search_terms": ["ambulance", "emergency transport", "medical transport"],
                "examples": ["Emergency ambulance", "Medical transport", "Air ambulance"],
            },
            {
                "id": "public-transit",
                "label": "Public Transportation",
                "irs_reference_tag": "public_transportation",
                "description": "Public transit, taxi, train, plane fares for medical care",
                "search_terms": ["bus", "train", "taxi", "uber", "lyft", "plane", "flight", "public transit"],
                "examples": ["Bus fare to appointment", "Taxi to hospital", "Flight for treatment"],
            },
            {
                "id": "mileage-parking",
                "label": "Mileage & Parking",
                "irs_reference_tag": "vehicle_expenses",
                "description": "Car mileage (21¢ per mile for 2024), parking, tolls",
                "search_terms": ["mileage", "parking", "toll", "gas", "car expenses"],
                "examples": ["Medical appointment mileage", "Hospital parking", "Medical travel tolls"],
            },
            {
                "id": "caregiver-travel",
                "label": "Caregiver Travel",
                "irs_reference_tag": "caregiver_transportation",
                "description": "Caregiver travel if medically necessary to accompany patient",
                "search_terms": ["caregiver travel", "family travel", "companion travel"],
                "examples": ["Parent travel for child care", "Spouse travel for support"],
            },
            {
                "id": "medical-lodging",
                "label": "Medical Lodging",
                "irs_reference_tag": "medical_lodging",
                "description": (
                    "Lodging (up to $50/night per person, $100 if caregiver accompanies; "
                    "no meals unless inpatient)"
                ),
                "search_terms": ["hotel", "lodging", "accommodation", "medical travel lodging"],
                "examples": ["Hotel for medical treatment", "Ronald McDonald House", "Medical travel lodging"],
            },
            {
                "id": "medical-conferences",
                "label": "Medical Conferences",
                "irs_reference_tag": "medical_conferences",
                "description": "Medical conferences (transportation and admission only)",
                "search_terms": ["medical conference", "health conference", "medical education"],
                "examples": ["Diabetes conference", "Cancer support conference"],
            },
        ],
    },
    {
        "id": "special-treatments",
        "label": "Special Treatments & Programs",
        "irs_reference_tag": "special_programs",
        "description": "Specialized treatment programs and services",
        "search_terms": ["treatment program", "addiction", "fertility", "weight loss", "special education"],
        "subcategories": [
            {
                "id": "addiction-treatment",
                "label": "Addiction Treatment",
                "irs_reference_tag": "addiction_treatment",
                "description": (
                    "Alcoholism/drug addiction treatment (inpatient programs, "
                    "transportation to AA/NA if prescribed)"
                ),
                "search_terms": ["alcoholism", "drug addiction", "rehab", "aa", "na", "addiction treatment"],
                "examples": ["Alcohol rehab program", "Drug treatment center", "AA meeting transportation"],
            },
            {
                "id": "fertility-treatments",
                "label": "Fertility Treatments",
                "irs_reference_tag": "fertility_treatments",
                "description": "IVF, reversal of prior surgery, egg/sperm storage",
                "search_terms": ["ivf", "fertility", "egg storage", "sperm storage", "fertility treatment"],
                "examples": ["IVF treatment", "Fertility medications", "Egg freezing"],
            },
            {
                "id": "sterilization",
                "label": "Sterilization Procedures",
                "irs_reference_tag": "sterilization_procedures",
                "description": "Vasectomy, tubal ligation",
                "search_terms": ["vasectomy", "tubal ligation", "sterilization"],
                "examples": ["Vasectomy procedure", "Tubal ligation surgery"],
            },
            {
                "id": "smoking-cessation",
                "label": "Stop-Smoking Programs",
                "irs_reference_tag": "smoking_cessation",
                "description": "Stop-smoking programs (fees, not OTC unless prescribed)",
                "search_terms": ["stop smoking", "smoking cessation", "quit smoking"],
                "examples": ["Smoking cessation program", "Nicotine replacement therapy"],
            },
            {
                "id": "weight-loss-programs",
                "label": "Weight-Loss Programs",
                "irs_reference_tag": "weight_loss_programs",
                "description": "Weight-loss programs if prescribed for a diagnosed condition",
                "search_terms": ["weight loss", "diet program", "obesity treatment"],
                "examples": ["Medically supervised diet", "Obesity treatment program"],
            },
            {
                "id": "special-education",
                "label": "Special Education",
                "irs_reference_tag": "special_education",
                "description": (
                    "Doctor-recommended for learning disabilities, Braille, "
                    "remedial speech/language training"
                ),
                "search_terms": ["special education", "learning disability", "speech training", "braille training"],
                "examples": ["Learning disability tutoring", "Speech therapy training", "Braille instruction"],
            },
            {
                "id": "transplants",
                "label": "Transplants & Organ Donation",
                "irs_reference_tag": "transplant_procedures",
                "description": "Transplants and organ donor-related medical costs",
                "search_terms": ["transplant", "organ donation", "donor costs"],
                "examples": ["Kidney transplant", "Organ donor expenses", "Transplant medications"],
            },
        ],
    },
    {
        "id": DOCTOR_PRESCRIBED_ONLY,
        "label": "Doctor-Prescribed Items",
        "irs_reference_tag": DOCTOR_PRESCRIBED_ONLY,
        "description": "Items deductible only when a doctor prescribes them for a specific medical condition",
        "search_terms": ["doctor prescribed", "prescribed by doctor", "letter of medical necessity", "lmn"],
        "subcategories": [
            {
                "id": "nutritional-supplements",
                "label": "Nutritional Supplements",
                "irs_reference_tag": "prescribed_supplements",
                "description": "Vitamins and supplements recommended by a practitioner for a diagnosed condition",
                "search_terms": ["vitamin", "supplement", "nutritional supplement", "herbal"],
                "examples": ["Prescribed vitamin D", "Prenatal vitamins", "Iron supplement"],
            },
            {
                "id": "fitness-programs",
                "label": "Prescribed Exercise Programs",
                "irs_reference_tag": "prescribed_exercise",
                "description": "Gym or exercise program fees when prescribed to treat a specific disease",
                "search_terms": ["gym", "gym membership", "fitness", "exercise program"],
                "examples": ["Gym membership for heart disease", "Supervised exercise program"],
            },
            {
                "id": "massage-therapy",
                "label": "Massage Therapy",
                "irs_reference_tag": "prescribed_massage",
                "description": "Massage prescribed to treat a specific injury or condition",
                "search_terms": ["massage", "massage therapy", "bodywork"],
                "examples": ["Massage for back injury", "Lymphatic drainage massage"],
            },
            {
                "id": "special-foods",
                "label": "Special Foods",
                "irs_reference_tag": "prescribed_special_foods",
                "description": "Excess cost of special foods prescribed for an illness, over ordinary food",
                "search_terms": ["special food", "gluten-free", "medical food", "special diet"],
                "examples": ["Gluten-free food for celiac disease", "Medical formula"],
            },
            {
                "id": "air-purification",
                "label": "Air Purifiers & Climate Control",
                "irs_reference_tag": "prescribed_air_treatment",
                "description": "Air purifiers, humidifiers or air conditioners prescribed for allergies or asthma",
                "search_terms": ["air purifier", "humidifier", "air conditioner", "hepa filter"],
                "examples": ["HEPA air purifier for asthma", "Humidifier for respiratory condition"],
            },
        ],
    },
]


def default_categories() -> list[MedicalCategory]:
    """Build the compiled-in taxonomy as immutable category objects."""
    return [MedicalCategory.from_dict(data) for data in MEDICAL_CATEGORY_DATA]
