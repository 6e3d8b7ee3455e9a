# -*- coding: utf-8 -*-
"""
Translation dictionaries for English and Romanian.

This module contains all user-visible strings produced by the Taskboard core.
"""

TRANSLATIONS = {
    "en": {
        # Generic errors
        "error.internal": "Internal error",
        "error.invalid_input": "Invalid input",
        "error.bad_credentials": "Invalid email or password",
        "error.forbidden": "You do not have access to this resource",
        "error.not_found": "Not found",
        "error.conflict": "Already exists",
        "error.store_failure": "Database error",

        # Projects
        "project.invalid_name": "Invalid name",
        "project.not_found": "Project not found",

        # Tasks
        "task.project_required": "projectId is required",
        "task.fields_required": "projectId and title are required",
        "task.empty_title": "title cannot be empty",
        "task.invalid_completed": "completed must be true or false",
        "task.invalid_patch": "Invalid task update",
        "task.not_found": "Task not found",
        "task.forbidden": "You do not have access to this task",

        # Users
        "user.name_required": "Name is required",
        "user.email_required": "Email is required",
        "user.password_required": "Password is required",
        "user.email_taken": "Email {email} is already registered",
        "user.not_found": "User not found",
        "user.password_too_long": "Password is too long (max 72 bytes)",
    },
    "ro": {
        # Generic errors
        "error.internal": "Eroare internă",
        "error.invalid_input": "Date invalide",
        "error.bad_credentials": "Email sau parolă greșită",
        "error.forbidden": "Nu ai acces la această resursă",
        "error.not_found": "Inexistent",
        "error.conflict": "Există deja",
        "error.store_failure": "Eroare de bază de date",

        # Projects
        "project.invalid_name": "Nume invalid",
        "project.not_found": "Project inexistent",

        # Tasks
        "task.project_required": "projectId este obligatoriu",
        "task.fields_required": "projectId si title sunt obligatorii",
        "task.empty_title": "title nu poate fi gol",
        "task.invalid_completed": "completed trebuie să fie true sau false",
        "task.invalid_patch": "Actualizare invalidă a task-ului",
        "task.not_found": "Task inexistent",
        "task.forbidden": "Nu ai acces la acest task",

        # Users
        "user.name_required": "Completează numele",
        "user.email_required": "Completează email-ul",
        "user.password_required": "Completează parola",
        "user.email_taken": "Email-ul {email} este deja înregistrat",
        "user.not_found": "Utilizator inexistent",
        "user.password_too_long": "Parola este prea lungă (maxim 72 de octeți)",
    },
}
