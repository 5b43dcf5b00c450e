# -*- coding: utf-8 -*-
"""Arabic translations."""

AR_TRANSLATIONS = {
    # Dialogs
    "dialog.error": "خطأ",
    "dialog.warning": "تحذير",
    "dialog.success": "نجاح",
    "dialog.confirm": "تأكيد",

    # Buttons
    "button.cancel": "إلغاء",
    "button.back": "السابق",
    "button.next": "التالي",
    "button.create": "إنشاء المستند",
    "button.retry": "إعادة المحاولة",

    # Document kinds
    "document.kind.purchase_order": "أمر شراء",
    "document.kind.quotation": "عرض سعر",
    "document.kind.sales_agreement": "اتفاقية بيع",
    "document.kind.all": "جميع المستندات",

    # Document statuses
    "document.status.draft": "مسودة",
    "document.status.pending": "قيد الانتظار",
    "document.status.approved": "موافق عليه",
    "document.status.rejected": "مرفوض",

    # Approval workflow
    "workflow.submit_for_approval": "إرسال للموافقة",
    "workflow.approve": "موافقة",
    "workflow.reject": "رفض",
    "workflow.return_to_draft": "إعادة إلى مسودة",
    "workflow.reopen": "إعادة فتح كمسودة",

    # Dashboard
    "dashboard.search_placeholder": "البحث في المستندات...",
    "dashboard.sort.newest": "الأحدث أولاً",
    "dashboard.sort.oldest": "الأقدم أولاً",
    "dashboard.sort.amount_high": "المبلغ: من الأعلى إلى الأدنى",
    "dashboard.sort.amount_low": "المبلغ: من الأدنى إلى الأعلى",
    "dashboard.no_documents": "لا توجد مستندات",
    "dashboard.language_toggle": "English",

    # Wizard
    "wizard.title": "إنشاء {kind}",
    "wizard.subtitle": "أكمل النموذج أدناه لإنشاء {kind} جديد",
    "wizard.step_progress": "الخطوة {current} من {total}",
    "wizard.section.basic_info": "المعلومات الأساسية",
    "wizard.section.line_items": "البنود",
    "wizard.section.terms": "الشروط والأحكام",
    "wizard.section.template_choice": "القالب والمعاينة",
    "wizard.submitting": "جارٍ الإنشاء...",
    "wizard.success": "تم إنشاء {kind} {reference} بنجاح.",

    # Templates
    "template.standard": "القالب القياسي",
    "template.professional": "القالب الاحترافي",
    "template.minimal": "القالب المختصر",
    "template.detailed": "القالب المفصل",

    # Preview placeholders
    "preview.title_placeholder": "عنوان المستند",
    "preview.reference_placeholder": "REF-0000",
    "preview.date_placeholder": "YYYY-MM-DD",
    "preview.client_placeholder": "اسم العميل",
    "preview.email_placeholder": "client@example.com",
    "preview.item_placeholder": "اسم البند",
    "preview.not_specified": "غير محدد",
    "preview.total": "الإجمالي",

    # Validation
    "validation.title_min": "يجب أن يتكون العنوان من 3 أحرف على الأقل",
    "validation.reference_required": "الرقم المرجعي مطلوب",
    "validation.date_invalid": "يرجى إدخال تاريخ صحيح (YYYY-MM-DD)",
    "validation.client_name_required": "اسم العميل مطلوب",
    "validation.email_invalid": "يرجى إدخال بريد إلكتروني صحيح",
    "validation.items_required": "يجب إضافة بند واحد على الأقل",
    "validation.item_name_required": "اسم البند مطلوب",
    "validation.quantity_min": "يجب أن تكون الكمية 1 على الأقل",
    "validation.quantity_integer": "يجب أن تكون الكمية عدداً صحيحاً",
    "validation.quantity_max": "الكمية كبيرة جداً",
    "validation.price_negative": "لا يمكن أن يكون السعر سالباً",
    "validation.price_invalid": "يرجى إدخال سعر صحيح",
    "validation.price_max": "السعر كبير جداً",
    "validation.payment_terms_required": "شروط الدفع مطلوبة",
    "validation.end_before_start": "لا يمكن أن يسبق تاريخ الانتهاء تاريخ البدء",
    "validation.template_unknown": "يرجى اختيار قالب",
    "validation.field_required": "الحقل '{field}' مطلوب",
    "validation.check_data": "يرجى التحقق من البيانات المدخلة",

    # Errors
    "error.persistence.failed": "تعذر حفظ المستند. يرجى المحاولة مرة أخرى.",
    "error.persistence.not_signed_in": "يجب تسجيل الدخول لإنشاء المستندات.",
    "error.transition.invalid": "هذا الإجراء غير متاح حالياً.",
    "error.unexpected": "حدث خطأ غير متوقع.",
}
