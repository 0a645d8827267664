"""Server-rendered article pages: listing, create, and edit."""

from django.contrib import messages
from django.contrib.auth.mixins import LoginRequiredMixin
from django.core.exceptions import ValidationError
from django.shortcuts import redirect, render
from django.views import View
from django.views.generic import ListView

from .components import FIELDS, IMAGE_FIELD, ArticleForm
from .models import Article


class ArticleListView(ListView):
    """Articles index; the form redirects here after a save."""

    model = Article
    template_name = "articles/article_list.html"
    context_object_name = "articles"
    paginate_by = 20

    def get_queryset(self):
        return Article.objects.select_related("owner")


class ArticleFormView(LoginRequiredMixin, View):
    """Render and submit the article form in create or edit mode.

    The route's ``pk`` selects edit mode; without it the form creates a new
    article. Anonymous users are sent to the login page.
    """

    template_name = "articles/article_form.html"
    form_class = ArticleForm

    def get_form(self) -> ArticleForm:
        return self.form_class.mount(self.kwargs.get("pk"), user=self.request.user)

    def get(self, request, *args, **kwargs):
        return self.render_form(self.get_form())

    def post(self, request, *args, **kwargs):
        form = self.get_form()
        # Title before slug, so a submitted slug wins over the derived one.
        for field in FIELDS:
            if field == IMAGE_FIELD:
                if IMAGE_FIELD in request.FILES:
                    form.set(field, request.FILES[IMAGE_FIELD])
            elif field in request.POST:
                form.set(field, request.POST[field])

        try:
            outcome = form.save()
        except ValidationError:
            return self.render_form(form)

        messages.success(request, outcome.status, extra_tags="status")
        return redirect(outcome.location)

    def render_form(self, form: ArticleForm):
        return render(self.request, self.template_name, {"form": form, "article": form.article})


__all__ = ["ArticleFormView", "ArticleListView"]
