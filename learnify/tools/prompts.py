"""Study plan prompt template and localized user-facing messages."""

SUPPORTED_LANGUAGES = ("id", "en")
DEFAULT_LANGUAGE = "id"

PLAN_PROMPT_TEMPLATES = {
    "id": """Berikan rencana pembelajaran terstruktur untuk {subject} dengan format berikut:

# Rencana Pembelajaran {subject} 📚

## Gambaran Umum
[Gambaran singkat mata pelajaran dan manfaatnya]

## 1. Tahapan Pembelajaran 📘
### Tingkat Dasar
- Konsep 1
- Konsep 2

### Tingkat Menengah
- Konsep 1
- Konsep 2

### Tingkat Lanjut
- Konsep 1
- Konsep 2

## 2. Sumber Belajar 📖
### Buku Rekomendasi
- Buku 1
- Buku 2

### Sumber Online
- Platform 1
- Platform 2

## 3. Metode Pembelajaran 🎯
### Teknik Belajar
- Metode 1
- Metode 2

### Latihan Praktik
- Aktivitas 1
- Aktivitas 2

## 4. Tips Sukses Belajar 💡
- Tip 1
- Tip 2

## Langkah Selanjutnya
[Saran konkret cara memulai]""",
    "en": """Give a structured study plan for {subject} using the following format:

# {subject} Study Plan 📚

## Overview
[Short overview of the subject and why it is worth learning]

## 1. Learning Path 📘
### Beginner
- Concept 1
- Concept 2

### Intermediate
- Concept 1
- Concept 2

### Advanced
- Concept 1
- Concept 2

## 2. Learning Resources 📖
### Recommended Books
- Book 1
- Book 2

### Online Resources
- Platform 1
- Platform 2

## 3. Learning Methods 🎯
### Study Techniques
- Method 1
- Method 2

### Practice
- Activity 1
- Activity 2

## 4. Tips for Success 💡
- Tip 1
- Tip 2

## Next Steps
[Concrete advice on how to get started]""",
}

_SUBJECT_FAILURE = {
    "id": "Maaf, terjadi kesalahan dalam membuat rencana pembelajaran untuk {subject}. Error: {error}",
    "en": "Sorry, something went wrong while creating the study plan for {subject}. Error: {error}",
}

_FATAL_ERROR = {
    "id": "Terjadi kesalahan: {description}",
    "en": "An error occurred: {description}",
}

_MISSING_API_KEY = {
    "id": "API key tidak dikonfigurasi. Pastikan environment variable GOOGLE_API_KEY telah diatur.",
    "en": "API key is not configured. Make sure the GOOGLE_API_KEY environment variable is set.",
}

_CLIENT_INIT_FAILURE = {
    "id": "Gagal menginisialisasi Gemini AI: {error}",
    "en": "Failed to initialize Gemini AI: {error}",
}

POPULAR_SUBJECTS = {
    "id": [
        "Matematika",
        "Fisika",
        "Kimia",
        "Biologi",
        "Bahasa Inggris",
        "Pemrograman",
        "Ekonomi",
        "Sejarah",
    ],
    "en": [
        "Mathematics",
        "Physics",
        "Chemistry",
        "Biology",
        "English",
        "Programming",
        "Economics",
        "History",
    ],
}


def check_language(language: str) -> str:
    """Return the language code, raising ValueError if it is not supported."""
    if language not in SUPPORTED_LANGUAGES:
        raise ValueError(
            f"Unsupported language '{language}'. Choose one of: {', '.join(SUPPORTED_LANGUAGES)}"
        )
    return language


def build_plan_prompt(subject: str, language: str = DEFAULT_LANGUAGE) -> str:
    """Fill the study plan template for a single subject."""
    return PLAN_PROMPT_TEMPLATES[check_language(language)].format(subject=subject)


def format_subject_failure(subject: str, error: Exception | str, language: str = DEFAULT_LANGUAGE) -> str:
    """Fallback content shown in place of a plan that could not be generated."""
    return _SUBJECT_FAILURE[check_language(language)].format(subject=subject, error=str(error))


def format_fatal_error(description: str, language: str = DEFAULT_LANGUAGE) -> str:
    return _FATAL_ERROR[check_language(language)].format(description=description)


def missing_api_key_message(language: str = DEFAULT_LANGUAGE) -> str:
    return _MISSING_API_KEY[check_language(language)]


def client_init_failure_message(error: Exception | str, language: str = DEFAULT_LANGUAGE) -> str:
    return _CLIENT_INIT_FAILURE[check_language(language)].format(error=str(error))


CLI_MESSAGES = {
    "id": {
        "popular_header": "Pilihan populer:",
        "picker_help": "Ketik mata pelajaran untuk menambah, -nama untuk menghapus, atau nomor untuk pilihan populer.",
        "picker_submit": "Tekan Enter pada baris kosong untuk membuat rencana.",
        "picker_prompt": "Mata pelajaran",
        "selected": "Dipilih: {subjects}",
        "not_selected": "{subject} belum dipilih",
        "already_selected": "{subject} sudah dipilih",
        "no_subjects": "Belum ada mata pelajaran. Berikan nama mata pelajaran atau gunakan --interactive.",
        "creating": "Menyusun rencana pembelajaran untuk {count} mata pelajaran...",
        "saved": "Disimpan ke {path}",
        "done": "Selesai! {succeeded}/{total} rencana berhasil dibuat",
        "failed": "Gagal: {subjects}",
    },
    "en": {
        "popular_header": "Popular subjects:",
        "picker_help": "Type a subject to add it, -subject to remove it, a number for a popular pick.",
        "picker_submit": "Press Enter on an empty line to generate.",
        "picker_prompt": "Subject",
        "selected": "Selected: {subjects}",
        "not_selected": "{subject} is not selected",
        "already_selected": "{subject} is already selected",
        "no_subjects": "No subjects given. Pass subject names or use --interactive.",
        "creating": "Creating study plans for {count} subject(s)...",
        "saved": "Saved to {path}",
        "done": "Done! {succeeded}/{total} plans created",
        "failed": "Failed: {subjects}",
    },
}


def cli_message(key: str, language: str = DEFAULT_LANGUAGE, **values) -> str:
    """Localized command-line text; `values` fill the template placeholders."""
    return CLI_MESSAGES[check_language(language)][key].format(**values)
