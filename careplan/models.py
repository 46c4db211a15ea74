from django.db import models
from django.conf import settings


class CarePlanManager(models.Manager):

    def save_plan(self, user, survey_data, care_plan):
        plan = self.create(user=user, survey_data=survey_data, care_plan=care_plan)
        return plan.pk

    def find_latest(self, user):
        return self.filter(user=user).order_by('-created_at', '-pk').first()

    def find_all(self):
        return self.select_related('user').order_by('pk')


class CarePlan(models.Model):
    user = models.ForeignKey(settings.AUTH_USER_MODEL, on_delete=models.CASCADE, related_name='care_plans')

    survey_data = models.JSONField(default=dict, blank=True)  # raw answers, keyed by question
    care_plan = models.JSONField(default=dict, blank=True)  # normalized AI output or the error variant

    created_at = models.DateTimeField(auto_now_add=True)
    last_reminder_sent = models.DateTimeField(blank=True, null=True)

    objects = CarePlanManager()

    class Meta:
        indexes = [
            models.Index(fields=['user', 'created_at'], name='careplan_user_created_idx'),
        ]

    @property
    def has_error(self):
        return "error" in (self.care_plan or {})

    @property
    def wash_frequency(self):
        return (self.care_plan or {}).get("wash_frequency") or ""

    def mark_reminder_sent(self, timestamp):
        self.last_reminder_sent = timestamp
        self.save(update_fields=['last_reminder_sent'])

    def __str__(self):
        return f"Care plan for {self.user.username} @ {self.created_at}"


class Progress(models.Model):
    user = models.ForeignKey(settings.AUTH_USER_MODEL, on_delete=models.CASCADE)
    step = models.PositiveIntegerField()
    title = models.CharField(max_length=200)
    notes = models.TextField(blank=True)
    completed = models.BooleanField(default=False)
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        ordering = ['step']
        verbose_name_plural = 'progress'

    def __str__(self):
        return f"Step {self.step} for {self.user.username}"
