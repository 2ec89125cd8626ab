"""Closed sets of document categories and fields the classification prompt asks for."""

MEDICAL_CATEGORIES: tuple[str, ...] = (
    "lab_requisition",
    "lab_report",
    "prescription_order",
    "patient_registration",
    "test_results",
    "referral_form",
    "medical_history",
    "billing_statement",
    "appointment_form",
)

INSURANCE_CATEGORIES: tuple[str, ...] = (
    "insurance_verification",
    "insurance_prior_auth",
    "insurance_claim",
    "insurance_eob",
    "insurance_card",
    "insurance_appeal",
    "insurance_enrollment",
    "insurance_denial",
    "insurance_policy",
)

DOCUMENT_CATEGORIES: tuple[str, ...] = (*MEDICAL_CATEGORIES, *INSURANCE_CATEGORIES, "other")

PATIENT_FIELDS: tuple[str, ...] = (
    "firstName",
    "lastName",
    "dateOfBirth",
    "patientPhoneNumber",
    "patientStreetAddress",
    "patientAddressCity",
    "patientAddressState",
    "patientAddressZip",
    "sex",
)

INSURANCE_FIELDS: tuple[str, ...] = (
    "insuranceId",
    "insuranceGroupNumber",
    "insuranceCompany",
    "policyNumber",
    "planName",
    "effectiveDate",
    "expirationDate",
    "copay",
    "deductible",
    "claimNumber",
)

MEDICAL_FIELDS: tuple[str, ...] = (
    "physicianName",
    "physicianPhone",
    "facilityName",
    "testRequested",
    "diagnosisCode",
    "procedureCode",
    "urgentStatus",
    "dateOfService",
    "authorizationNumber",
)

FINANCIAL_FIELDS: tuple[str, ...] = (
    "totalAmount",
    "allowedAmount",
    "paidAmount",
    "patientResponsibility",
)

EXTRACTED_FIELDS: tuple[str, ...] = (
    *PATIENT_FIELDS,
    *INSURANCE_FIELDS,
    *MEDICAL_FIELDS,
    *FINANCIAL_FIELDS,
)
