"""
Prompts for synthetic employee generation.
"""


class EmployeePrompts:

    @staticmethod
    def render_generation_msg(format_instructions: str, record_number: int = 1, total: int = 1) -> str:
        """
        Renders the request for one fictional employee record.
        ``format_instructions`` come from the output parser so the model sees the exact schema.
        """
        return f"""
You are a helpful assistant that generates fictional employee data for an HR directory.

Generate ONE fictional employee record (record {record_number} of {total}).
The record must include:
- identity: first name, last name, date of birth (YYYY-MM-DD)
- a full postal address
- contact details with a valid email address and a phone number
- job details: title, department, hire date, employment type, salary as a NUMBER, currency
- work location: nearest office and whether the employee is remote (true/false)
- reporting manager (use null when there is none)
- a list of skills
- a list of performance reviews with review date, numeric rating and comments
- benefits: health insurance, retirement plan, paid time off as a NUMBER of days
- an emergency contact with name, relationship and phone number
- free-text notes

Vary names, departments, countries and seniority between records. Use realistic values.

{format_instructions}
""".strip()
